"""
permissions.py
==============

Права доступа для API.

Администратор — пользователь Django с is_staff (вход через /admin/login/,
далее SessionAuthentication). Публичные формы сайта создают записи без входа.

Классы комбинируются через `|`:
    permission_classes = [IsCreateAction | permissions.IsAdminUser]
"""

from __future__ import annotations

from rest_framework import permissions
from rest_framework.request import Request


def is_staff(request: Request) -> bool:
    user = getattr(request, "user", None)
    return bool(user and user.is_authenticated and user.is_staff)


def show_all_requested(request: Request) -> bool:
    """?show_all=true — админка просит все записи, включая неопубликованные."""
    return request.query_params.get("show_all", "").lower() in ("true", "1")


class IsCreateAction(permissions.BasePermission):
    """
    Разрешение: только создание записи (POST на список).

    Используется для публичных форм: заявки, отзывы.
    """

    def has_permission(self, request: Request, view) -> bool:
        return request.method == "POST" and getattr(view, "action", None) == "create"


class IsAdminOrReadOnly(permissions.BasePermission):
    """Чтение — всем, изменение — только администратору."""

    def has_permission(self, request: Request, view) -> bool:
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_staff(request)
