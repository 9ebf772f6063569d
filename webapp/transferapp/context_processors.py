"""
context_processors.py
=====================

Настройки сайта в контексте каждого шаблона: `site_settings`, `home_settings`.

Строки читаются лениво: страница, которая их не использует, не делает запросов.
"""

from django.conf import settings
from django.utils.functional import SimpleLazyObject

from .models import HomeSettings, SiteSettings


def site_settings(request) -> dict:
    return {
        "site_settings": SimpleLazyObject(SiteSettings.load),
        "home_settings": SimpleLazyObject(HomeSettings.load),
        "site_base_url": settings.SITE_BASE_URL,
    }
