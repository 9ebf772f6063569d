"""
urls.py
=======

Маршруты (URL patterns) публичного сайта `transferapp`.

- `/` — главная;
- `/blog/`, `/blog/<slug>/` — блог;
- `/reviews/` — отзывы;
- `/gallery/`, `/gallery/<slug>/` — фотогалереи;
- `/routes/<id>/` — маршрут;
- `/sitemap.xml`, `/sitemap-index.xml`, `/robots.txt` — для поисковиков;
- `/health/` — healthcheck.
"""
from django.contrib.sitemaps.views import sitemap
from django.urls import path

from . import views
from .sitemaps import SITEMAPS, SITEMAP_TEMPLATE

urlpatterns = [
    path("", views.home, name="home"),
    path("blog/", views.blog_list, name="blog_list"),
    path("blog/<slug:slug>/", views.blog_detail, name="blog_detail"),
    path("reviews/", views.reviews, name="reviews"),
    path("gallery/", views.gallery_list, name="gallery_list"),
    path("gallery/<slug:slug>/", views.gallery_detail, name="gallery_detail"),
    path("routes/<int:pk>/", views.route_detail, name="route_detail"),
    path(
        "sitemap.xml",
        sitemap,
        {"sitemaps": SITEMAPS, "template_name": SITEMAP_TEMPLATE},
        name="sitemap",
    ),
    path("sitemap-index.xml", views.sitemap_index, name="sitemap_index"),
    path("robots.txt", views.robots_txt, name="robots_txt"),
    path("health/", views.healthcheck, name="healthcheck"),
]
