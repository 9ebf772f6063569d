"""
sitemaps.py
===========

Карта сайта на `django.contrib.sitemaps` с расширениями Google:
`<image:image>` (обложки статей, фото галерей, логотип) и `<video:video>`
(видеоотзывы).

Разделы (ключи SITEMAPS):
- static  — главная, блог, отзывы, галерея;
- blog    — опубликованные статьи;
- gallery — опубликованные галереи со всеми фото;
- routes  — активные маршруты.

Домен и протокол берутся из SITE_BASE_URL, а не из запроса, чтобы
ссылки в карте совпадали с каноническим адресом сайта.
"""

from __future__ import annotations

from typing import Dict, List
from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.urls import reverse
from django.utils.text import Truncator

from .models import BlogPost, PhotoGallery, Review, Route
from .seo import absolute_url, logo_url

SITEMAP_TEMPLATE = "transferapp/sitemap.xml"


class MediaSitemap(Sitemap):
    """Sitemap, в котором у каждой ссылки могут быть картинки и видео."""

    def get_domain(self, site=None) -> str:
        return urlsplit(settings.SITE_BASE_URL).netloc

    def get_protocol(self, protocol=None) -> str:
        return urlsplit(settings.SITE_BASE_URL).scheme or "https"

    def images(self, item) -> List[Dict[str, str]]:
        return []

    def videos(self, item) -> List[Dict[str, str]]:
        return []

    def get_urls(self, page=1, site=None, protocol=None):
        urls = super().get_urls(page=page, site=site, protocol=protocol)
        for url_info in urls:
            url_info["images"] = self.images(url_info["item"])
            url_info["videos"] = self.videos(url_info["item"])
        return urls


class StaticViewSitemap(MediaSitemap):
    PAGES = {
        # имя маршрута: (changefreq, priority)
        "home": ("daily", 1.0),
        "blog_list": ("daily", 0.8),
        "reviews": ("weekly", 0.7),
        "gallery_list": ("weekly", 0.7),
    }

    def items(self) -> List[str]:
        return list(self.PAGES)

    def location(self, item: str) -> str:
        return reverse(item)

    def changefreq(self, item: str) -> str:
        return self.PAGES[item][0]

    def priority(self, item: str) -> float:
        return self.PAGES[item][1]

    def images(self, item: str) -> List[Dict[str, str]]:
        if item != "home":
            return []
        return [{
            "loc": logo_url(),
            "title": "RoyalTransfer - Трансферы из Калининграда в Европу",
            "caption": "Логотип компании RoyalTransfer",
        }]

    def videos(self, item: str) -> List[Dict[str, str]]:
        if item != "reviews":
            return []
        reviews = Review.objects.visible().exclude(video_url="")
        return [
            {
                "thumbnail_loc": self._thumbnail(review),
                "title": f"Видеоотзыв: {review.customer_name}",
                "description": Truncator(review.comment).chars(200),
                "content_loc": absolute_url(review.video_url),
                "publication_date": review.created_at,
            }
            for review in reviews
        ]

    @staticmethod
    def _thumbnail(review: Review) -> str:
        image = review.review_image_url or review.image_url
        return absolute_url(image) if image else logo_url()


class BlogSitemap(MediaSitemap):
    changefreq = "weekly"
    priority = 0.7

    def items(self):
        return BlogPost.objects.filter(is_published=True)

    def lastmod(self, post: BlogPost):
        return post.updated_at

    def images(self, post: BlogPost) -> List[Dict[str, str]]:
        if not post.image_url:
            return []
        return [{
            "loc": absolute_url(post.image_url),
            "title": post.title,
            "caption": f"{post.title} - Блог RoyalTransfer",
        }]


class GallerySitemap(MediaSitemap):
    changefreq = "monthly"
    priority = 0.6

    def items(self):
        return PhotoGallery.objects.filter(is_published=True).prefetch_related("photos")

    def lastmod(self, gallery: PhotoGallery):
        return gallery.updated_at

    def images(self, gallery: PhotoGallery) -> List[Dict[str, str]]:
        return [
            {
                "loc": absolute_url(photo.url),
                "title": photo.title or gallery.title,
                "caption": photo.description or f'Фотография из галереи "{gallery.title}"',
            }
            for photo in gallery.photos.all()
        ]


class RouteSitemap(MediaSitemap):
    changefreq = "monthly"
    priority = 0.5

    def items(self):
        return Route.objects.filter(is_active=True)

    def lastmod(self, route: Route):
        return route.updated_at

    def images(self, route: Route) -> List[Dict[str, str]]:
        if not route.image_url:
            return []
        title = f"{route.origin_city} - {route.destination_city}"
        return [{
            "loc": absolute_url(route.image_url),
            "title": title,
            "caption": f"Маршрут {title}: {route.description or 'комфортный трансфер'}",
        }]


SITEMAPS = {
    "static": StaticViewSitemap,
    "blog": BlogSitemap,
    "gallery": GallerySitemap,
    "routes": RouteSitemap,
}
