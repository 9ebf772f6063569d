"""
apps.py
=======

Конфигурация Django-приложения `transferapp`.

Приложение включает:
- заявки с сайта (обратная связь, быстрые заявки, заказ трансфера);
- контент (блог, отзывы, преимущества, автопарк, маршруты, галереи);
- глобальные настройки сайта и главной страницы.
"""

from django.apps import AppConfig


class TransferappConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "transferapp"
    verbose_name = "Royal Transfer"
