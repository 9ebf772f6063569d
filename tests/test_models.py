# tests/test_models.py
from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from transferapp.models import (
    BenefitStats,
    BlogPost,
    GalleryPhoto,
    PhotoGallery,
    Review,
    SiteSettings,
    TransferConfig,
    Vehicle,
)
from transferapp.utils import (
    average_rating,
    build_vehicle_options,
    format_price_label,
    make_slug,
    transliterate,
)


# --- slug-и ---

def test_transliterate_and_make_slug():
    assert transliterate("Щука") == "schuka"
    assert make_slug("Поездка в Гданьск!") == "poezdka-v-gdansk"
    assert make_slug("  Берлин — Варшава  ") == "berlin-varshava"
    assert len(make_slug("очень " * 30)) <= 50


@pytest.mark.django_db
def test_blog_post_slug_generated_and_unique(make_post):
    first = make_post("Поездка в Гданьск")
    second = make_post("Поездка в Гданьск")
    third = make_post("Поездка в Гданьск")
    assert first.slug == "poezdka-v-gdansk"
    assert second.slug == "poezdka-v-gdansk-2"
    assert third.slug == "poezdka-v-gdansk-3"
    assert first.get_absolute_url() == "/blog/poezdka-v-gdansk/"


@pytest.mark.django_db
def test_blog_post_published_at_set_once(make_post):
    post = make_post("Черновик", is_published=False)
    assert post.published_at is None

    post.is_published = True
    post.save()
    published_at = post.published_at
    assert published_at is not None

    # снятие с публикации дату не стирает, повторная публикация её не меняет
    post.is_published = False
    post.save()
    post.is_published = True
    post.save()
    post.refresh_from_db()
    assert post.published_at == published_at


@pytest.mark.django_db
def test_blog_posts_ordered_by_publication_date(make_post):
    draft = make_post("Черновик", is_published=False)
    older = make_post("Старая", published_at=datetime(2024, 5, 1, tzinfo=dt_timezone.utc))
    newer = make_post("Новая", published_at=datetime(2025, 5, 1, tzinfo=dt_timezone.utc))
    assert list(BlogPost.objects.all()) == [newer, older, draft]


# --- отзывы ---

@pytest.mark.django_db
def test_reviews_visible_and_average(make_review):
    make_review(rating=5)
    make_review(rating=4)
    make_review(rating=1, visible=False)
    # опубликован, но не одобрен — не показываем
    Review.objects.create(customer_name="Олег", rating=2, comment="...", is_published=True)

    visible = Review.objects.visible()
    assert visible.count() == 2
    assert average_rating(visible) == 4.5


@pytest.mark.django_db
def test_average_rating_empty():
    assert average_rating(Review.objects.all()) is None


# --- настройки ---

@pytest.mark.django_db
def test_singleton_load_creates_defaults():
    assert not SiteSettings.objects.exists()
    site = SiteSettings.load()
    assert site.pk == 1
    assert site.company_name == "RoyalTransfer"
    assert site.google_maps_api_key is None
    # повторный вызов возвращает ту же строку
    assert SiteSettings.load().pk == 1
    assert SiteSettings.objects.count() == 1

    stats = BenefitStats.load()
    assert (stats.clients, stats.directions, stats.experience, stats.support) == ("5000+", "15+", "10+", "24/7")


@pytest.mark.django_db
def test_singleton_save_always_overwrites_first_row():
    SiteSettings.load()
    SiteSettings(phone="+7 000").save()
    assert SiteSettings.objects.count() == 1
    assert SiteSettings.load().phone == "+7 000"


# --- автопарк, маршруты, форма заказа ---

@pytest.mark.django_db
def test_route_min_price_ignores_zero(make_route):
    route = make_route(price_comfort=Decimal("0"), price_business=Decimal("150"), price_minivan=Decimal("200"))
    assert route.min_price == Decimal("150")
    assert route.get_absolute_url() == f"/routes/{route.pk}/"


def test_format_price_label():
    assert format_price_label(Decimal("95")) == "от 95.00 EUR"
    assert format_price_label(None) == "по запросу"


@pytest.mark.django_db
def test_vehicle_options_from_db(make_vehicle):
    vehicle = make_vehicle("Бизнес", price=Decimal("120"), image_url="/uploads/e.jpg")
    make_vehicle("Минивэн", is_active=False)
    config = TransferConfig.load()
    config.custom_image_urls = {"biznes": "https://i.postimg.cc/x/biz.jpg"}

    options = build_vehicle_options(config, Vehicle.objects.filter(is_active=True))
    assert options == [{
        "value": "biznes",
        "label": "Бизнес",
        "price": "от 120.00 EUR",
        "image": "https://i.postimg.cc/x/biz.jpg",
        "desc": "Mercedes-Benz E-Class",
        "vehicle_id": vehicle.pk,
    }]


@pytest.mark.django_db
def test_vehicle_options_from_config():
    config = TransferConfig.load()
    config.use_vehicles_from_db = False
    config.vehicle_options = [
        {"value": "comfort", "label": "Комфорт", "price": "от 100 EUR", "image": "/a.jpg", "desc": "Skoda"},
        "мусор",
    ]
    config.custom_image_urls = {"comfort": "/b.jpg"}

    options = build_vehicle_options(config, [])
    assert len(options) == 1
    assert options[0]["image"] == "/b.jpg"
    # сохранённые настройки не меняются
    assert config.vehicle_options[0]["image"] == "/a.jpg"


# --- галереи ---

@pytest.mark.django_db
def test_gallery_slug_validation():
    gallery = PhotoGallery(title="Калининград", slug="Bad Slug")
    with pytest.raises(ValidationError) as exc:
        gallery.full_clean()
    assert "slug" in exc.value.message_dict

    gallery = PhotoGallery(title="Ка", slug="ok")
    with pytest.raises(ValidationError) as exc:
        gallery.full_clean()
    assert {"title", "slug"} <= set(exc.value.message_dict)


@pytest.mark.django_db
def test_next_photo_order(make_gallery):
    gallery = make_gallery(photos=0)
    assert gallery.next_photo_order() == 0
    GalleryPhoto.objects.create(gallery=gallery, url="https://i.postimg.cc/a.jpg", order=4)
    assert gallery.next_photo_order() == 5
