"""
seo.py
======

Структурированные данные JSON-LD (schema.org) для публичных страниц.

Все функции возвращают обычные словари; в шаблон они попадают через
`to_json_ld()`, который экранирует `<`, чтобы строка в `<script>` не могла
закрыть тег раньше времени.
"""

from __future__ import annotations

import json
from typing import Iterable, List, Mapping, Optional

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import strip_tags

from .utils import average_rating

SCHEMA_CONTEXT = "https://schema.org"

COMPANY = {
    "name": "RoyalTransfer",
    "legal_name": 'ООО "РоялТрансфер"',
    "description": (
        "Трансферы из Калининграда в города Европы. Комфортабельные автомобили, "
        "опытные водители, безопасность и пунктуальность."
    ),
    "telephone": "+7 (906) 219-99-17",
    "email": "info@royaltransfer.org",
    "address": {
        "streetAddress": "ул. Университетская, 2Г",
        "addressLocality": "Калининград",
        "addressRegion": "Калининградская область",
        "postalCode": "236040",
        "addressCountry": "RU",
    },
    "geo": {"latitude": "54.7065", "longitude": "20.5109"},
    "same_as": [
        "https://www.instagram.com/royaltransfer",
        "https://t.me/royaltransfer",
        "https://wa.me/79062199917",
    ],
}

DEFAULT_RATING = 4.8
DESCRIPTION_LENGTH = 160


def absolute_url(path: str) -> str:
    """"/blog/x/" → "https://royaltransfer.org/blog/x/"; абсолютные ссылки не трогаем."""
    if path.startswith(("http://", "https://")):
        return path
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{settings.SITE_BASE_URL}{path}"


def logo_url() -> str:
    return absolute_url("/images/logo.png")


def _organization() -> dict:
    return {"@type": "Organization", "name": COMPANY["name"], "url": settings.SITE_BASE_URL}


def local_business_schema(review_count: int = 0, avg_rating: Optional[float] = None) -> dict:
    """Компания как LocalBusiness: контакты, адрес, круглосуточный график, рейтинг."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "name": COMPANY["name"],
        "legalName": COMPANY["legal_name"],
        "description": COMPANY["description"],
        "image": logo_url(),
        "url": settings.SITE_BASE_URL,
        "telephone": COMPANY["telephone"],
        "email": COMPANY["email"],
        "address": {"@type": "PostalAddress", **COMPANY["address"]},
        "geo": {"@type": "GeoCoordinates", **COMPANY["geo"]},
        "priceRange": "$$",
        "openingHoursSpecification": {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": [
                "Monday", "Tuesday", "Wednesday", "Thursday",
                "Friday", "Saturday", "Sunday",
            ],
            "opens": "00:00",
            "closes": "23:59",
        },
        "sameAs": COMPANY["same_as"],
        "aggregateRating": {
            "@type": "AggregateRating",
            "ratingValue": str(avg_rating if avg_rating is not None else DEFAULT_RATING),
            "reviewCount": str(review_count),
        },
    }


def website_schema() -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "url": settings.SITE_BASE_URL,
        "name": COMPANY["name"],
        "description": COMPANY["description"],
        "inLanguage": "ru-RU",
    }


def breadcrumb_schema(crumbs: Iterable[Mapping[str, str]]) -> dict:
    """
    Хлебные крошки.

    :param crumbs: [{"name": "Главная", "url": "/"}, {"name": "Блог", "url": "/blog/"}]
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": crumb["name"],
                "item": absolute_url(crumb["url"]),
            }
            for position, crumb in enumerate(crumbs, start=1)
        ],
    }


def blog_post_schema(post) -> dict:
    description = post.excerpt or strip_tags(post.content)[:DESCRIPTION_LENGTH]
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": post.title,
        "description": description,
        "image": absolute_url(post.image_url) if post.image_url else absolute_url("/images/default-blog.jpg"),
        "datePublished": post.published_at or post.created_at,
        "dateModified": post.updated_at,
        "author": _organization(),
        "publisher": {
            "@type": "Organization",
            "name": COMPANY["name"],
            "logo": {"@type": "ImageObject", "url": logo_url()},
        },
        "mainEntityOfPage": {"@type": "WebPage", "@id": absolute_url(post.get_absolute_url())},
        "inLanguage": "ru-RU",
    }


def service_schema(route) -> dict:
    """Маршрут как услуга трансфера; цена — минимальная из классов авто, в евро."""
    price = route.min_price
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": f"Трансфер {route.origin_city} — {route.destination_city}",
        "description": route.description or f"{route.distance} км, {route.estimated_time}",
        "provider": _organization(),
        "serviceType": "TransportationService",
        "areaServed": {
            "@type": "GeoCircle",
            "geoMidpoint": {"@type": "GeoCoordinates", **COMPANY["geo"]},
            "geoRadius": "500 km",
        },
        "offers": {
            "@type": "Offer",
            "price": str(price) if price is not None else "0",
            "priceCurrency": "EUR",
        },
    }


def review_schema(review) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Review",
        "itemReviewed": {
            "@type": "LocalBusiness",
            "name": COMPANY["name"],
            "image": logo_url(),
            "url": settings.SITE_BASE_URL,
        },
        "author": {"@type": "Person", "name": review.customer_name},
        "datePublished": review.created_at.date(),
        "reviewBody": review.comment,
        "reviewRating": {
            "@type": "Rating",
            "ratingValue": review.rating,
            "bestRating": "5",
            "worstRating": "1",
        },
    }


def aggregate_rating_schema(reviews) -> Optional[dict]:
    """Сводный рейтинг по отзывам; None, если отзывов нет."""
    avg = average_rating(reviews)
    if avg is None:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "AggregateRating",
        "itemReviewed": {"@type": "LocalBusiness", "name": COMPANY["name"]},
        "ratingValue": str(avg),
        "reviewCount": str(reviews.count()),
        "bestRating": "5",
        "worstRating": "1",
    }


def faq_schema(items: Iterable[Mapping[str, str]]) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item["question"],
                "acceptedAnswer": {"@type": "Answer", "text": item["answer"]},
            }
            for item in items
        ],
    }


def to_json_ld(*schemas: Optional[dict]) -> str:
    """
    Сериализовать схемы для `<script type="application/ld+json">`.

    Одна схема — объект, несколько — массив; None пропускаются.
    """
    items: List[dict] = [schema for schema in schemas if schema]
    payload = items[0] if len(items) == 1 else items
    text = json.dumps(payload, cls=DjangoJSONEncoder, ensure_ascii=False)
    return text.replace("<", "\\u003c")
