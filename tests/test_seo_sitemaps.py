# tests/test_seo_sitemaps.py
"""JSON-LD, sitemap, RSS и robots.txt."""
from __future__ import annotations

import json

import pytest

from transferapp import seo
from transferapp.models import Review

BASE = "https://royaltransfer.org"


# --- JSON-LD ---

def test_to_json_ld_escapes_script_close():
    text = seo.to_json_ld({"@type": "Thing", "name": "</script><b>"})
    assert "</script>" not in text
    assert json.loads(text)["name"] == "</script><b>"


def test_to_json_ld_many_and_none():
    text = seo.to_json_ld(seo.website_schema(), None, seo.faq_schema([{"question": "Q?", "answer": "A"}]))
    payload = json.loads(text)
    assert [item["@type"] for item in payload] == ["WebSite", "FAQPage"]
    assert payload[1]["mainEntity"][0]["acceptedAnswer"]["text"] == "A"


def test_local_business_schema_default_rating():
    schema = seo.local_business_schema(review_count=3)
    assert schema["aggregateRating"] == {"@type": "AggregateRating", "ratingValue": "4.8", "reviewCount": "3"}
    assert schema["address"]["addressLocality"] == "Калининград"
    assert schema["url"] == BASE


def test_breadcrumb_schema_positions():
    schema = seo.breadcrumb_schema([{"name": "Главная", "url": "/"}, {"name": "Блог", "url": "/blog/"}])
    items = schema["itemListElement"]
    assert [i["position"] for i in items] == [1, 2]
    assert items[1]["item"] == f"{BASE}/blog/"


def test_absolute_url():
    assert seo.absolute_url("/blog/") == f"{BASE}/blog/"
    assert seo.absolute_url("uploads/a.jpg") == f"{BASE}/uploads/a.jpg"
    assert seo.absolute_url("https://i.postimg.cc/a.jpg") == "https://i.postimg.cc/a.jpg"


@pytest.mark.django_db
def test_blog_post_and_service_schema(make_post, make_route):
    post = make_post("Поездка в Гданьск", excerpt="", content="<p>Текст <b>статьи</b></p>")
    schema = seo.blog_post_schema(post)
    assert schema["description"] == "Текст статьи"
    assert schema["mainEntityOfPage"]["@id"] == f"{BASE}/blog/poezdka-v-gdansk/"

    route = make_route()
    service = seo.service_schema(route)
    assert service["offers"] == {"@type": "Offer", "price": "120.00", "priceCurrency": "EUR"}


@pytest.mark.django_db
def test_aggregate_rating_schema(make_review):
    assert seo.aggregate_rating_schema(Review.objects.visible()) is None
    make_review(rating=5)
    make_review(rating=3)
    schema = seo.aggregate_rating_schema(Review.objects.visible())
    assert schema["ratingValue"] == "4.0"
    assert schema["reviewCount"] == "2"


# --- sitemap ---

@pytest.mark.django_db
def test_sitemap_contains_all_sections(client, make_post, make_gallery, make_route, make_review):
    make_post("Поездка в Гданьск", image_url="https://i.postimg.cc/blog/cover.jpg")
    make_post("Черновик", is_published=False)
    make_gallery("kaliningrad", photos=2)
    make_gallery("hidden", is_published=False)
    route = make_route()
    make_review(video_url="https://video.example.com/review.mp4")

    resp = client.get("/sitemap.xml")
    assert resp.status_code == 200
    body = resp.content.decode()

    assert f"<loc>{BASE}/</loc>" in body
    assert f"<loc>{BASE}/blog/poezdka-v-gdansk/</loc>" in body
    assert "chernovik" not in body
    assert "<image:loc>https://i.postimg.cc/blog/cover.jpg</image:loc>" in body
    assert f"<loc>{BASE}/gallery/kaliningrad/</loc>" in body
    assert "https://i.postimg.cc/photo/kaliningrad-1.jpg" in body
    assert "/gallery/hidden/" not in body
    assert f"<loc>{BASE}/routes/{route.pk}/</loc>" in body
    assert "<video:content_loc>https://video.example.com/review.mp4</video:content_loc>" in body
    assert f"<image:loc>{BASE}/images/logo.png</image:loc>" in body


@pytest.mark.django_db
def test_sitemap_sections(client, make_post, make_route):
    make_post("Поездка в Гданьск")
    make_route()

    blog = client.get("/api/sitemaps/blog/")
    assert blog.status_code == 200
    assert "/blog/poezdka-v-gdansk/" in blog.content.decode()
    assert "/routes/" not in blog.content.decode()

    assert client.get("/api/sitemaps/routes/").status_code == 200
    assert client.get("/api/sitemaps/unknown/").status_code == 404


@pytest.mark.django_db
def test_sitemap_index(client):
    resp = client.get("/sitemap-index.xml")
    assert resp.status_code == 200
    assert resp["Content-Type"].startswith("application/xml")
    body = resp.content.decode()
    assert f"<loc>{BASE}/sitemap.xml</loc>" in body
    for section in ("blog", "gallery", "routes"):
        assert f"<loc>{BASE}/api/sitemaps/{section}/</loc>" in body


def test_robots_txt(client):
    resp = client.get("/robots.txt")
    assert resp.status_code == 200
    body = resp.content.decode()
    assert "Disallow: /admin/" in body
    assert "Disallow: /api/" in body
    assert f"Sitemap: {BASE}/sitemap.xml" in body


# --- RSS ---

@pytest.mark.django_db
def test_rss_feed(client, make_post):
    for i in range(17):
        make_post(f"Статья {i}", excerpt=f"Анонс {i}")
    make_post("Черновик", is_published=False)

    resp = client.get("/api/feed/rss/")
    assert resp.status_code == 200
    assert resp["Content-Type"].startswith("application/rss+xml")
    body = resp.content.decode()
    assert body.count("<item>") == 15
    assert "Черновик" not in body
    assert f"{BASE}/blog/" in body
