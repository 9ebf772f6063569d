"""
serializers.py
==============

DRF-сериализаторы для моделей сайта.

Важно:
- статус новых заявок выставляет вьюха (`new`), клиент его не задаёт;
- пустые строки в логотипах и ключе карт сохраняются как null;
- slug статьи: при создании подбирается уникальный, при изменении
  занятый slug — ошибка 400.
"""

from __future__ import annotations

from rest_framework import serializers

from transferapp.models import (
    ApplicationRequest,
    Benefit,
    BenefitStats,
    BlogPost,
    ContactRequest,
    GalleryPhoto,
    HomeSettings,
    PhotoGallery,
    Review,
    Route,
    SiteSettings,
    TransferConfig,
    TransferRequest,
    Vehicle,
)
from transferapp.utils import unique_slug


# ---------------------------------------------------------------------------
# Заявки
# ---------------------------------------------------------------------------

class ContactRequestSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = ContactRequest
        fields = [
            "id", "name", "email", "phone", "message",
            "status", "status_display", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ApplicationRequestSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = ApplicationRequest
        fields = [
            "id", "name", "phone", "contact_method",
            "status", "status_display", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {
            "contact_method": {
                "error_messages": {
                    "invalid_choice": "Неверный способ связи. Допустимые значения: telegram, whatsapp, call",
                },
            },
        }


class VehicleShortSerializer(serializers.ModelSerializer):
    class Meta:
        model = Vehicle
        fields = ["id", "vehicle_class", "brand", "model"]


class TransferRequestSerializer(serializers.ModelSerializer):
    """
    Заказ трансфера.

    Если нужен обратный трансфер — обязательны дата и время возвращения.
    Если клиент сообщит адрес водителю — адрес прибытия очищается.
    """

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    vehicle_details = VehicleShortSerializer(source="vehicle", read_only=True)

    class Meta:
        model = TransferRequest
        fields = [
            "id", "customer_name", "customer_phone",
            "vehicle_class", "vehicle", "vehicle_details",
            "date", "time",
            "origin_city", "origin_address", "destination_city", "destination_address",
            "tell_driver", "payment_method",
            "return_transfer", "return_date", "return_time",
            "comments", "status", "status_display", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def _current(self, attrs: dict, field: str, default=None):
        if field in attrs:
            return attrs[field]
        return getattr(self.instance, field, default)

    def validate(self, attrs: dict) -> dict:
        if self._current(attrs, "return_transfer", False):
            if not self._current(attrs, "return_date") or not self._current(attrs, "return_time"):
                raise serializers.ValidationError(
                    {"return_date": "Укажите дату и время обратного трансфера"}
                )
        else:
            # поездка в одну сторону: данные обратного трансфера не храним
            attrs["return_date"] = None
            attrs["return_time"] = None

        if attrs.get("tell_driver"):
            attrs["destination_address"] = ""
        return attrs


# ---------------------------------------------------------------------------
# Контент
# ---------------------------------------------------------------------------

class BlogPostSerializer(serializers.ModelSerializer):
    slug = serializers.SlugField(max_length=BlogPost.SLUG_MAX_LENGTH, required=False, allow_blank=True)

    class Meta:
        model = BlogPost
        fields = [
            "id", "title", "slug", "content", "excerpt", "image_url",
            "is_published", "published_at", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "published_at", "created_at", "updated_at"]

    def validate_slug(self, value: str) -> str:
        if not value:
            # пустой slug — модель сгенерирует из заголовка
            return "" if self.instance is None else self.instance.slug
        others = BlogPost.objects.all()
        if self.instance is not None:
            others = others.exclude(pk=self.instance.pk)
            if others.filter(slug=value).exists():
                raise serializers.ValidationError(
                    "Указанный URL уже используется для другой статьи. "
                    "Пожалуйста, выберите другой URL."
                )
            return value
        return unique_slug(others, value, max_length=BlogPost.SLUG_MAX_LENGTH)


class ReviewSerializer(serializers.ModelSerializer):
    class Meta:
        model = Review
        fields = [
            "id", "customer_name", "rating", "comment",
            "image_url", "review_image_url", "video_url",
            "is_published", "is_approved", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ReviewApproveSerializer(serializers.Serializer):
    approved = serializers.BooleanField(default=True)


class BenefitSerializer(serializers.ModelSerializer):
    class Meta:
        model = Benefit
        fields = ["id", "title", "description", "icon", "order"]
        read_only_fields = ["id"]
        extra_kwargs = {"order": {"required": False}}


class BenefitStatsSerializer(serializers.ModelSerializer):
    class Meta:
        model = BenefitStats
        fields = ["clients", "directions", "experience", "support", "updated_at"]
        read_only_fields = ["updated_at"]


class VehicleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Vehicle
        fields = [
            "id", "vehicle_class", "brand", "model", "year", "seats",
            "description", "image_url", "amenities", "price", "is_active",
            "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class RouteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Route
        fields = [
            "id", "origin_city", "destination_city", "distance", "estimated_time",
            "price_comfort", "price_business", "price_minivan",
            "description", "image_url", "popularity_rating", "is_active",
            "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


# ---------------------------------------------------------------------------
# Галереи
# ---------------------------------------------------------------------------

class GalleryPhotoSerializer(serializers.ModelSerializer):
    class Meta:
        model = GalleryPhoto
        fields = ["id", "gallery", "url", "title", "description", "order", "created_at"]
        read_only_fields = ["id", "gallery", "created_at"]
        extra_kwargs = {"order": {"required": False}}


class PhotoGallerySerializer(serializers.ModelSerializer):
    """Галерея для списка: число фото и обложка (первое фото по порядку)."""

    photo_count = serializers.SerializerMethodField()
    cover = serializers.SerializerMethodField()

    class Meta:
        model = PhotoGallery
        fields = [
            "id", "title", "slug", "description", "is_published",
            "photo_count", "cover", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_photo_count(self, obj: PhotoGallery) -> int:
        count = getattr(obj, "photo_count", None)
        return obj.photos.count() if count is None else count

    def get_cover(self, obj: PhotoGallery):
        photo = obj.photos.order_by("order", "id").first()
        return GalleryPhotoSerializer(photo).data if photo else None


class PhotoGalleryDetailSerializer(PhotoGallerySerializer):
    photos = GalleryPhotoSerializer(many=True, read_only=True)

    class Meta(PhotoGallerySerializer.Meta):
        fields = PhotoGallerySerializer.Meta.fields + ["photos"]


# ---------------------------------------------------------------------------
# Настройки
# ---------------------------------------------------------------------------

class TransferConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = TransferConfig
        fields = [
            "title", "description", "use_vehicles_from_db",
            "vehicle_options", "custom_image_urls", "updated_at",
        ]
        read_only_fields = ["updated_at"]

    def validate_vehicle_options(self, value):
        if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
            raise serializers.ValidationError("Ожидается список объектов")
        return value

    def validate_custom_image_urls(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Ожидается объект {value: url}")
        return value


class SiteSettingsSerializer(serializers.ModelSerializer):
    BLANK_TO_NULL = ("header_logo_url", "footer_logo_url", "google_maps_api_key")

    class Meta:
        model = SiteSettings
        fields = [
            "phone", "email", "address", "working_hours",
            "company_name", "company_desc",
            "instagram_link", "telegram_link", "whatsapp_link",
            "header_logo_url", "footer_logo_url", "google_maps_api_key",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]

    def validate(self, attrs: dict) -> dict:
        for field in self.BLANK_TO_NULL:
            value = attrs.get(field)
            if isinstance(value, str) and not value.strip():
                attrs[field] = None
        return attrs


class HomeSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = HomeSettings
        fields = [
            "title", "subtitle", "background_image_url",
            "feature1_title", "feature1_text", "feature1_icon",
            "feature2_title", "feature2_text", "feature2_icon",
            "feature3_title", "feature3_text", "feature3_icon",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]
