"""
exceptions.py (API)
===================

Единый формат ошибок REST API: `{"error": "<сообщение>"}`.

- ValidationError → 400 + `details` с ошибками по полям;
- NotFound / Http404 → 404;
- NotAuthenticated / PermissionDenied → 403;
- любое непойманное исключение → лог с трейсбеком, откат транзакции, 500.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Внутренняя ошибка сервера"


def first_error_message(detail: Any) -> str:
    """
    Достать первое человекочитаемое сообщение из detail DRF.

    {"name": ["Обязательное поле."]} → "name: Обязательное поле."
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = first_error_message(value)
            if not message:
                continue
            if key in ("detail", "non_field_errors"):
                return message
            return f"{key}: {message}"
        return ""
    if isinstance(detail, (list, tuple)):
        for item in detail:
            message = first_error_message(item)
            if message:
                return message
        return ""
    return str(detail)


def api_exception_handler(exc: Exception, context: dict) -> Response:
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "?"

    response = exception_handler(exc, context)
    if response is None:
        logger.error("Необработанная ошибка в %s", view_name, exc_info=exc)
        set_rollback()
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = response.data
    if isinstance(exc, ValidationError):
        logger.warning("%s: ошибка валидации: %s", view_name, detail)
        response.data = {"error": first_error_message(detail), "details": detail}
    else:
        response.data = {"error": first_error_message(detail)}
    return response
