"""
pagination.py (API)
===================

Постраничная выдача списков заявок: `?page=2&limit=20`.

Формат ответа:
    {"results": [...], "pagination": {"total": 42, "page": 2, "limit": 20, "pages": 3}}

Страница за концом списка — не ошибка: `results` пустой, `page` остаётся
запрошенным, `total` и `pages` считаются как обычно.
"""

from __future__ import annotations

import math

from django.conf import settings
from django.core.paginator import InvalidPage
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class RequestPagination(PageNumberPagination):
    page_size = settings.API_PAGE_SIZE
    page_query_param = "page"
    page_size_query_param = "limit"
    max_page_size = 100

    def get_requested_page(self, request) -> int:
        try:
            number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1
        return max(number, 1)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        page_size = self.get_page_size(request)
        if not page_size:
            return None

        self.paginator = self.django_paginator_class(queryset, page_size)
        self.requested_page = self.get_requested_page(request)
        try:
            self.page = self.paginator.page(self.requested_page)
        except InvalidPage:
            self.page = None
            return []
        return list(self.page)

    def get_paginated_response(self, data) -> Response:
        total = self.paginator.count
        limit = self.paginator.per_page
        return Response({
            "results": data,
            "pagination": {
                "total": total,
                "page": self.requested_page,
                "limit": limit,
                "pages": math.ceil(total / limit) if limit else 0,
            },
        })
