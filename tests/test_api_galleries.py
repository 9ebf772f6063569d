# tests/test_api_galleries.py
"""Фотогалереи: видимость, счётчик и обложка, добавление фото по одному и пачкой."""
from __future__ import annotations

import pytest

from transferapp.models import GalleryPhoto, PhotoGallery


@pytest.mark.django_db
def test_gallery_public_list(api_client, make_gallery):
    make_gallery("kaliningrad", photos=3)
    make_gallery("draft-gallery", is_published=False, photos=1)

    data = api_client.get("/api/galleries/").json()
    assert len(data) == 1
    gallery = data[0]
    assert gallery["slug"] == "kaliningrad"
    assert gallery["photo_count"] == 3
    assert gallery["cover"]["order"] == 0
    assert "photos" not in gallery


@pytest.mark.django_db
def test_gallery_detail_includes_photos(api_client, make_gallery):
    gallery = make_gallery(photos=2)
    data = api_client.get(f"/api/galleries/{gallery.pk}/").json()
    assert [p["order"] for p in data["photos"]] == [0, 1]
    assert data["photo_count"] == 2


@pytest.mark.django_db
def test_unpublished_gallery_hidden_from_public(api_client, admin_api, make_gallery):
    gallery = make_gallery("draft-gallery", is_published=False, photos=1)
    photo = gallery.photos.get()

    assert api_client.get(f"/api/galleries/{gallery.pk}/").status_code == 404
    assert api_client.get(f"/api/galleries/{gallery.pk}/photos/").status_code == 404
    assert api_client.get(f"/api/gallery-photos/{photo.pk}/").status_code == 404

    assert admin_api.get(f"/api/galleries/{gallery.pk}/").status_code == 200
    assert len(admin_api.get("/api/galleries/?show_all=true").json()) == 1


@pytest.mark.django_db
def test_gallery_create_validation(admin_api):
    resp = admin_api.post("/api/galleries/", {"title": "Гданьск", "slug": "Gdansk Old Town"}, format="json")
    assert resp.status_code == 400
    assert "slug" in resp.json()["details"]

    resp = admin_api.post("/api/galleries/", {"title": "Гд", "slug": "gdansk"}, format="json")
    assert resp.status_code == 400
    assert "title" in resp.json()["details"]

    resp = admin_api.post(
        "/api/galleries/",
        {"title": "Гданьск", "slug": "gdansk", "is_published": True},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.json()["photo_count"] == 0
    assert resp.json()["cover"] is None


@pytest.mark.django_db
def test_gallery_duplicate_slug(admin_api, make_gallery):
    make_gallery("gdansk")
    resp = admin_api.post("/api/galleries/", {"title": "Гданьск 2", "slug": "gdansk"}, format="json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_add_photo_default_order(admin_api, make_gallery):
    gallery = make_gallery(photos=0)
    url = f"/api/galleries/{gallery.pk}/photos/"

    first = admin_api.post(url, {"url": "https://i.postimg.cc/a/1.jpg"}, format="json")
    second = admin_api.post(url, {"url": "https://i.postimg.cc/a/2.jpg", "title": "Набережная"}, format="json")
    assert first.status_code == 201
    assert first.json()["order"] == 0
    assert second.json()["order"] == 1
    assert second.json()["gallery"] == gallery.pk

    explicit = admin_api.post(url, {"url": "https://i.postimg.cc/a/3.jpg", "order": 10}, format="json")
    assert explicit.json()["order"] == 10

    bad = admin_api.post(url, {"url": "not a url"}, format="json")
    assert bad.status_code == 400


@pytest.mark.django_db
def test_add_photo_requires_admin(api_client, make_gallery):
    gallery = make_gallery()
    resp = api_client.post(
        f"/api/galleries/{gallery.pk}/photos/",
        {"url": "https://i.postimg.cc/a/1.jpg"},
        format="json",
    )
    assert resp.status_code == 403
    assert not GalleryPhoto.objects.exists()


@pytest.mark.django_db
def test_batch_upload_partial(admin_api, make_gallery):
    gallery = make_gallery(photos=2)
    resp = admin_api.post(
        f"/api/galleries/{gallery.pk}/photos/batch/",
        {"urls": ["https://i.postimg.cc/b/1.jpg", "ftp:/broken", "https://i.postimg.cc/b/2.jpg"]},
        format="json",
    )
    assert resp.status_code == 201
    data = resp.json()
    assert [p["order"] for p in data["created"]] == [2, 3]
    assert data["errors"] == [{"url": "ftp:/broken", "error": "Некорректный URL"}]
    assert gallery.photos.count() == 4


@pytest.mark.django_db
def test_batch_upload_all_invalid(admin_api, make_gallery):
    gallery = make_gallery()
    resp = admin_api.post(
        f"/api/galleries/{gallery.pk}/photos/batch/",
        {"urls": ["nope", 42]},
        format="json",
    )
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"]
    assert len(data["details"]) == 2
    assert not gallery.photos.exists()

    resp = admin_api.post(f"/api/galleries/{gallery.pk}/photos/batch/", {"urls": []}, format="json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_gallery_photo_update_and_delete(api_client, admin_api, make_gallery):
    gallery = make_gallery(photos=1)
    photo = gallery.photos.get()

    assert api_client.get(f"/api/gallery-photos/{photo.pk}/").status_code == 200
    assert api_client.patch(f"/api/gallery-photos/{photo.pk}/", {"title": "x"}, format="json").status_code == 403

    resp = admin_api.patch(f"/api/gallery-photos/{photo.pk}/", {"title": "Кафедральный собор"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Кафедральный собор"

    assert admin_api.delete(f"/api/gallery-photos/{photo.pk}/").status_code == 204
    assert not GalleryPhoto.objects.exists()


@pytest.mark.django_db
def test_gallery_delete_cascades(admin_api, make_gallery):
    gallery = make_gallery(photos=3)
    assert admin_api.delete(f"/api/galleries/{gallery.pk}/").status_code == 204
    assert not PhotoGallery.objects.exists()
    assert not GalleryPhoto.objects.exists()


@pytest.mark.django_db
def test_batch_upload_requires_object_body(admin_api, make_gallery):
    gallery = make_gallery()
    resp = admin_api.post(
        f"/api/galleries/{gallery.pk}/photos/batch/",
        ["https://i.postimg.cc/b/1.jpg"],
        format="json",
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Передайте непустой список urls"}
    assert not gallery.photos.exists()
