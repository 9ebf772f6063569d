"""
urls.py (API)
=============

Маршрутизация DRF-эндпоинтов.

Явные пути (`benefits/stats/`, настройки, sitemap, RSS) стоят раньше
роутера, иначе `benefits/<pk>/` перехватит `benefits/stats/`.
"""

from __future__ import annotations

from django.contrib.sitemaps.views import sitemap
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from transferapp.feeds import BlogPostFeed
from transferapp.sitemaps import SITEMAPS, SITEMAP_TEMPLATE
from .views import (
    ApplicationRequestViewSet,
    BenefitStatsView,
    BenefitViewSet,
    BlogPostViewSet,
    ContactRequestViewSet,
    GalleryPhotoViewSet,
    HomeSettingsView,
    PhotoGalleryViewSet,
    ReviewViewSet,
    RouteViewSet,
    SiteSettingsView,
    TransferConfigView,
    TransferRequestViewSet,
    VehicleViewSet,
)

router = DefaultRouter()
router.register(r"contact-requests", ContactRequestViewSet, basename="contact-requests")
router.register(r"application-requests", ApplicationRequestViewSet, basename="application-requests")
router.register(r"transfer-requests", TransferRequestViewSet, basename="transfer-requests")
router.register(r"blog", BlogPostViewSet, basename="blog")
router.register(r"reviews", ReviewViewSet, basename="reviews")
router.register(r"benefits", BenefitViewSet, basename="benefits")
router.register(r"vehicles", VehicleViewSet, basename="vehicles")
router.register(r"routes", RouteViewSet, basename="routes")
router.register(r"galleries", PhotoGalleryViewSet, basename="galleries")
router.register(r"gallery-photos", GalleryPhotoViewSet, basename="gallery-photos")

urlpatterns = [
    # Настройки (одна строка на таблицу)
    path("benefits/stats/", BenefitStatsView.as_view(), name="benefit-stats"),
    path("settings/", SiteSettingsView.as_view(), name="site-settings"),
    path("home/", HomeSettingsView.as_view(), name="home-settings"),
    path("transfers/", TransferConfigView.as_view(), name="transfer-config"),
    # Sitemap по разделам: /api/sitemaps/blog/ и т.д.
    path(
        "sitemaps/<str:section>/",
        sitemap,
        {"sitemaps": SITEMAPS, "template_name": SITEMAP_TEMPLATE},
        name="api-sitemap-section",
    ),
    path("feed/rss/", BlogPostFeed(), name="blog-feed"),
    # CRUD-эндпоинты:
    path("", include(router.urls)),
]
