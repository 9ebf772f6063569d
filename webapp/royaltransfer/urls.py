"""
urls.py
=======

Корневой маршрутизатор Django-проекта **RoyalTransfer**.

Структура маршрутов:
- /admin/ — админ-панель (заявки, контент, настройки сайта);
- /api/ — REST API ресурсов сайта;
- / — публичные страницы, sitemap, robots.txt.
"""

from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    # Панель администратора Django
    path("admin/", admin.site.urls),

    # DRF API
    path("api/", include("transferapp.api.urls")),

    # Публичный сайт
    path("", include("transferapp.urls")),
]
