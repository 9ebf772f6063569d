# tests/conftest.py
from __future__ import annotations

import os
import sys
from decimal import Decimal

import pytest

# --- Путь к Django-проекту и настройка DJANGO_SETTINGS_MODULE ---
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # корень репо
WEBAPP_DIR = os.path.join(REPO_ROOT, "webapp")
if WEBAPP_DIR not in sys.path:
    sys.path.insert(0, WEBAPP_DIR)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "royaltransfer.settings")

from rest_framework.test import APIClient  # noqa: E402

from transferapp.models import (  # noqa: E402
    BlogPost,
    GalleryPhoto,
    PhotoGallery,
    Review,
    Route,
    Vehicle,
)


@pytest.fixture(autouse=True)
def _site_base_url(settings):
    """Абсолютные ссылки в тестах всегда от боевого домена, независимо от окружения."""
    settings.SITE_BASE_URL = "https://royaltransfer.org"


@pytest.fixture
def api_client() -> APIClient:
    """Анонимный посетитель сайта."""
    return APIClient()


@pytest.fixture
def admin_api(admin_user) -> APIClient:
    """Администратор (is_staff), вошедший в админку."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


# --- Фабрики ---

@pytest.fixture
def make_post(db):
    def _create(title: str = "Поездка в Гданьск", is_published: bool = True, **kwargs) -> BlogPost:
        kwargs.setdefault("content", "<p>Текст статьи</p>")
        return BlogPost.objects.create(title=title, is_published=is_published, **kwargs)
    return _create


@pytest.fixture
def make_review(db):
    def _create(rating: int = 5, visible: bool = True, **kwargs) -> Review:
        kwargs.setdefault("customer_name", "Анна")
        kwargs.setdefault("comment", "Отличная поездка")
        return Review.objects.create(
            rating=rating,
            is_published=visible,
            is_approved=visible,
            **kwargs,
        )
    return _create


@pytest.fixture
def make_vehicle(db):
    def _create(vehicle_class: str = "Бизнес", is_active: bool = True, **kwargs) -> Vehicle:
        kwargs.setdefault("brand", "Mercedes-Benz")
        kwargs.setdefault("model", "E-Class")
        kwargs.setdefault("year", 2022)
        kwargs.setdefault("seats", 3)
        return Vehicle.objects.create(vehicle_class=vehicle_class, is_active=is_active, **kwargs)
    return _create


@pytest.fixture
def make_route(db):
    def _create(is_active: bool = True, **kwargs) -> Route:
        kwargs.setdefault("origin_city", "Калининград")
        kwargs.setdefault("destination_city", "Гданьск")
        kwargs.setdefault("distance", 170)
        kwargs.setdefault("estimated_time", "3 ч")
        kwargs.setdefault("price_comfort", Decimal("120.00"))
        kwargs.setdefault("price_business", Decimal("180.00"))
        return Route.objects.create(is_active=is_active, **kwargs)
    return _create


@pytest.fixture
def make_gallery(db):
    def _create(slug: str = "kaliningrad", is_published: bool = True, photos: int = 0, **kwargs) -> PhotoGallery:
        kwargs.setdefault("title", "Калининград")
        gallery = PhotoGallery.objects.create(slug=slug, is_published=is_published, **kwargs)
        for i in range(photos):
            GalleryPhoto.objects.create(
                gallery=gallery,
                url=f"https://i.postimg.cc/photo/{slug}-{i}.jpg",
                order=i,
            )
        return gallery
    return _create
