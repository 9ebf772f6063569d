# webapp/transferapp/views.py
"""
Представления (views) публичного сайта.

- home — главная: первый экран, маршруты, автопарк, преимущества,
  галереи, отзывы, блог, форма заказа трансфера
- blog_list / blog_detail — блог (неопубликованная статья — 404)
- reviews — одобренные отзывы и средняя оценка
- gallery_list / gallery_detail — фотогалереи
- route_detail — страница маршрута
- robots_txt, sitemap_index — служебные файлы для поисковиков
- healthcheck — проверка живости

На каждой странице есть JSON-LD (см. seo.py).
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.core.paginator import Paginator
from django.db.models import Count
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_GET

from . import seo
from .models import (
    Benefit,
    BenefitStats,
    BlogPost,
    PhotoGallery,
    Review,
    Route,
    TransferConfig,
    TransferRequest,
    Vehicle,
)
from .sitemaps import SITEMAPS
from .utils import average_rating, build_vehicle_options

logger = logging.getLogger(__name__)

BLOG_PAGE_SIZE = 9
HOME_ROUTES_LIMIT = 6
HOME_REVIEWS_LIMIT = 6
HOME_POSTS_LIMIT = 3
HOME_GALLERIES_LIMIT = 3

HOME_FAQ = [
    {
        "question": "Сколько стоит трансфер из Калининграда в Гданьск?",
        "answer": "Цена зависит от класса автомобиля и указана в разделе маршрутов. "
                  "Стоимость фиксируется при подтверждении заказа.",
    },
    {
        "question": "Можно ли заказать обратный трансфер?",
        "answer": "Да, отметьте «Обратный трансфер» в форме заказа и укажите дату и время.",
    },
    {
        "question": "Как оплатить поездку?",
        "answer": "Наличными водителю, картой или онлайн, способ выбирается в форме заказа.",
    },
]


def healthcheck(request) -> HttpResponse:
    """Простой healthcheck для аптайм-мониторинга."""
    return HttpResponse("RoyalTransfer is running.")


@require_GET
def home(request):
    visible_reviews = Review.objects.visible()
    review_count = visible_reviews.count()
    avg = average_rating(visible_reviews)
    config = TransferConfig.load()

    context = {
        "benefits": Benefit.objects.all(),
        "benefit_stats": BenefitStats.load(),
        "vehicles": Vehicle.objects.filter(is_active=True),
        "routes": Route.objects.filter(is_active=True).order_by("-popularity_rating", "id")[:HOME_ROUTES_LIMIT],
        "posts": BlogPost.objects.filter(is_published=True)[:HOME_POSTS_LIMIT],
        "reviews": visible_reviews[:HOME_REVIEWS_LIMIT],
        "average_rating": avg,
        "review_count": review_count,
        "galleries": (
            PhotoGallery.objects.filter(is_published=True)
            .annotate(photo_count=Count("photos"))[:HOME_GALLERIES_LIMIT]
        ),
        "transfer_config": config,
        "vehicle_options": build_vehicle_options(config, Vehicle.objects.filter(is_active=True)),
        "payment_methods": TransferRequest.PaymentMethod.choices,
        "faq": HOME_FAQ,
        "map_center": {"lat": seo.COMPANY["geo"]["latitude"], "lng": seo.COMPANY["geo"]["longitude"]},
        "json_ld": seo.to_json_ld(
            seo.local_business_schema(review_count, avg),
            seo.website_schema(),
            seo.breadcrumb_schema([{"name": "Главная", "url": "/"}]),
            seo.faq_schema(HOME_FAQ),
        ),
    }
    return render(request, "transferapp/home.html", context)


@require_GET
def blog_list(request):
    posts = BlogPost.objects.filter(is_published=True)
    page = Paginator(posts, BLOG_PAGE_SIZE).get_page(request.GET.get("page"))
    context = {
        "page": page,
        "json_ld": seo.to_json_ld(seo.breadcrumb_schema([
            {"name": "Главная", "url": "/"},
            {"name": "Блог", "url": reverse("blog_list")},
        ])),
    }
    return render(request, "transferapp/blog_list.html", context)


@require_GET
def blog_detail(request, slug: str):
    post = get_object_or_404(BlogPost, slug=slug, is_published=True)
    context = {
        "post": post,
        "json_ld": seo.to_json_ld(
            seo.blog_post_schema(post),
            seo.breadcrumb_schema([
                {"name": "Главная", "url": "/"},
                {"name": "Блог", "url": reverse("blog_list")},
                {"name": post.title, "url": post.get_absolute_url()},
            ]),
        ),
    }
    return render(request, "transferapp/blog_detail.html", context)


@require_GET
def reviews(request):
    visible_reviews = Review.objects.visible()
    review_list = list(visible_reviews)
    context = {
        "reviews": review_list,
        "average_rating": average_rating(visible_reviews),
        "review_count": len(review_list),
        "json_ld": seo.to_json_ld(
            seo.aggregate_rating_schema(visible_reviews),
            *[seo.review_schema(review) for review in review_list],
        ),
    }
    return render(request, "transferapp/reviews.html", context)


@require_GET
def gallery_list(request):
    galleries = PhotoGallery.objects.filter(is_published=True).annotate(photo_count=Count("photos"))
    context = {
        "galleries": galleries,
        "json_ld": seo.to_json_ld(seo.breadcrumb_schema([
            {"name": "Главная", "url": "/"},
            {"name": "Галерея", "url": reverse("gallery_list")},
        ])),
    }
    return render(request, "transferapp/gallery_list.html", context)


@require_GET
def gallery_detail(request, slug: str):
    gallery = get_object_or_404(PhotoGallery, slug=slug, is_published=True)
    context = {
        "gallery": gallery,
        "photos": gallery.photos.all(),
        "json_ld": seo.to_json_ld(seo.breadcrumb_schema([
            {"name": "Главная", "url": "/"},
            {"name": "Галерея", "url": reverse("gallery_list")},
            {"name": gallery.title, "url": gallery.get_absolute_url()},
        ])),
    }
    return render(request, "transferapp/gallery_detail.html", context)


@require_GET
def route_detail(request, pk: int):
    route = get_object_or_404(Route, pk=pk, is_active=True)
    context = {
        "route": route,
        "json_ld": seo.to_json_ld(
            seo.service_schema(route),
            seo.breadcrumb_schema([
                {"name": "Главная", "url": "/"},
                {"name": str(route), "url": route.get_absolute_url()},
            ]),
        ),
    }
    return render(request, "transferapp/route_detail.html", context)


@require_GET
def robots_txt(request) -> HttpResponse:
    """robots.txt: закрываем админку и API, указываем карту сайта."""
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin/",
        "Disallow: /api/",
        "",
        f"Sitemap: {settings.SITE_BASE_URL}/sitemap.xml",
        f"Host: {settings.SITE_BASE_URL}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain; charset=utf-8")


@require_GET
def sitemap_index(request):
    """Индекс карт сайта: общая карта и карты по разделам."""
    locations = [f"{settings.SITE_BASE_URL}{reverse('sitemap')}"]
    locations += [
        f"{settings.SITE_BASE_URL}{reverse('api-sitemap-section', kwargs={'section': section})}"
        for section in SITEMAPS
        if section != "static"
    ]
    return render(
        request,
        "transferapp/sitemap_index.xml",
        {"sitemaps": locations, "now": timezone.now()},
        content_type="application/xml; charset=utf-8",
    )
