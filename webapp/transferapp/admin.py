"""
admin.py
========

Регистрация моделей приложения `transferapp` в панели администратора Django.

Разделы:
- заявки (обратная связь, быстрые заявки, заказы трансфера) — фильтр
  по статусу и массовая смена статуса;
- контент (блог, отзывы, преимущества, автопарк, маршруты, галереи);
- настройки (сайт, главная, окно заказа, статистика преимуществ) —
  одна запись, без добавления второй и без удаления.

Цель:
Дать администратору один экран списка и редактирования на каждый тип данных.
"""
from __future__ import annotations

import logging

from django.contrib import admin, messages

from .models import (
    ApplicationRequest,
    Benefit,
    BenefitStats,
    BlogPost,
    ContactRequest,
    GalleryPhoto,
    HomeSettings,
    PhotoGallery,
    RequestStatus,
    Review,
    Route,
    SiteSettings,
    TransferConfig,
    TransferRequest,
    Vehicle,
)

logger = logging.getLogger(__name__)


# -------- Заявки --------

def _set_status(modeladmin, request, queryset, new_status: str) -> None:
    updated = queryset.update(status=new_status)
    logger.info("%s: статус %s у %s записей", queryset.model.__name__, new_status, updated)
    modeladmin.message_user(
        request,
        f"Статус «{RequestStatus(new_status).label}» установлен у {updated} заявок.",
        messages.SUCCESS,
    )


@admin.action(description="Отметить: в обработке")
def mark_processing(modeladmin, request, queryset) -> None:
    _set_status(modeladmin, request, queryset, RequestStatus.PROCESSING)


@admin.action(description="Отметить: выполнена")
def mark_completed(modeladmin, request, queryset) -> None:
    _set_status(modeladmin, request, queryset, RequestStatus.COMPLETED)


@admin.action(description="Отметить: отменена")
def mark_canceled(modeladmin, request, queryset) -> None:
    _set_status(modeladmin, request, queryset, RequestStatus.CANCELED)


class RequestAdmin(admin.ModelAdmin):
    """Общие настройки для заявок: статус, даты, массовые действия."""
    list_filter = ("status", "created_at")
    readonly_fields = ("created_at", "updated_at")
    actions = [mark_processing, mark_completed, mark_canceled]
    date_hierarchy = "created_at"


@admin.register(ContactRequest)
class ContactRequestAdmin(RequestAdmin):
    list_display = ("id", "name", "email", "phone", "status", "created_at")
    search_fields = ("name", "email", "phone", "message")


@admin.register(ApplicationRequest)
class ApplicationRequestAdmin(RequestAdmin):
    list_display = ("id", "name", "phone", "contact_method", "status", "created_at")
    list_filter = ("status", "contact_method", "created_at")
    search_fields = ("name", "phone")


@admin.register(TransferRequest)
class TransferRequestAdmin(RequestAdmin):
    """
    Заказы трансфера: маршрут, дата, автомобиль.
    Поля сгруппированы так же, как в форме бронирования на сайте.
    """
    list_display = (
        "id", "customer_name", "customer_phone",
        "origin_city", "destination_city", "date", "time",
        "vehicle_class", "return_transfer", "status", "created_at",
    )
    list_filter = ("status", "payment_method", "return_transfer", "date")
    search_fields = ("customer_name", "customer_phone", "origin_city", "destination_city", "comments")
    list_select_related = ("vehicle",)
    autocomplete_fields = ("vehicle",)
    fieldsets = (
        ("Клиент", {"fields": ("customer_name", "customer_phone", "status")}),
        ("Поездка", {"fields": (
            "date", "time",
            ("origin_city", "origin_address"),
            ("destination_city", "destination_address"),
            "tell_driver",
        )}),
        ("Автомобиль и оплата", {"fields": ("vehicle_class", "vehicle", "payment_method")}),
        ("Обратный трансфер", {"fields": ("return_transfer", "return_date", "return_time")}),
        (None, {"fields": ("comments", "created_at", "updated_at")}),
    )


# -------- Контент --------

@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "is_published", "published_at", "created_at")
    list_filter = ("is_published",)
    search_fields = ("title", "excerpt", "content")
    readonly_fields = ("published_at", "created_at", "updated_at")


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """
    Отзывы: новые приходят с сайта скрытыми.
    «Одобрить» публикует отзыв, «Снять с публикации» — скрывает.
    """
    list_display = ("customer_name", "rating", "is_approved", "is_published", "created_at")
    list_filter = ("is_approved", "is_published", "rating")
    search_fields = ("customer_name", "comment")
    readonly_fields = ("created_at", "updated_at")
    actions = ["approve", "unapprove"]

    @admin.action(description="Одобрить и опубликовать")
    def approve(self, request, queryset) -> None:
        updated = queryset.update(is_approved=True, is_published=True)
        self.message_user(request, f"Одобрено отзывов: {updated}.", messages.SUCCESS)

    @admin.action(description="Снять с публикации")
    def unapprove(self, request, queryset) -> None:
        updated = queryset.update(is_approved=False, is_published=False)
        self.message_user(request, f"Скрыто отзывов: {updated}.", messages.SUCCESS)


@admin.register(Benefit)
class BenefitAdmin(admin.ModelAdmin):
    list_display = ("order", "title", "icon")
    list_display_links = ("title",)
    ordering = ("order", "id")


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("vehicle_class", "brand", "model", "year", "seats", "price", "is_active")
    list_filter = ("vehicle_class", "is_active")
    search_fields = ("vehicle_class", "brand", "model")


@admin.register(Route)
class RouteAdmin(admin.ModelAdmin):
    list_display = (
        "origin_city", "destination_city", "distance", "estimated_time",
        "price_comfort", "price_business", "price_minivan",
        "popularity_rating", "is_active",
    )
    list_filter = ("is_active",)
    search_fields = ("origin_city", "destination_city")


class GalleryPhotoInline(admin.TabularInline):
    model = GalleryPhoto
    fields = ("url", "title", "description", "order")
    extra = 1
    ordering = ("order", "id")


@admin.register(PhotoGallery)
class PhotoGalleryAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "is_published", "photos_total", "created_at")
    list_filter = ("is_published",)
    search_fields = ("title", "slug", "description")
    prepopulated_fields = {"slug": ("title",)}
    inlines = [GalleryPhotoInline]

    @admin.display(description="Фотографий")
    def photos_total(self, obj: PhotoGallery) -> int:
        return obj.photos.count()


# -------- Настройки (одна запись) --------

class SingletonAdmin(admin.ModelAdmin):
    """Запись настроек создаётся один раз, удалить её нельзя."""

    def has_add_permission(self, request) -> bool:  # type: ignore[override]
        return not self.model.objects.exists()

    def has_delete_permission(self, request, obj=None) -> bool:  # type: ignore[override]
        return False


@admin.register(SiteSettings)
class SiteSettingsAdmin(SingletonAdmin):
    fieldsets = (
        ("Контакты", {"fields": ("phone", "email", "address", "working_hours")}),
        ("Компания", {"fields": ("company_name", "company_desc")}),
        ("Соцсети", {"fields": ("instagram_link", "telegram_link", "whatsapp_link")}),
        ("Логотипы", {"fields": ("header_logo_url", "footer_logo_url")}),
        ("Google Maps", {"fields": ("google_maps_api_key",)}),
    )


@admin.register(HomeSettings)
class HomeSettingsAdmin(SingletonAdmin):
    fieldsets = (
        ("Первый экран", {"fields": ("title", "subtitle", "background_image_url")}),
        ("Пункт 1", {"fields": ("feature1_title", "feature1_text", "feature1_icon")}),
        ("Пункт 2", {"fields": ("feature2_title", "feature2_text", "feature2_icon")}),
        ("Пункт 3", {"fields": ("feature3_title", "feature3_text", "feature3_icon")}),
    )


@admin.register(TransferConfig)
class TransferConfigAdmin(SingletonAdmin):
    fields = ("title", "description", "use_vehicles_from_db", "vehicle_options", "custom_image_urls")


@admin.register(BenefitStats)
class BenefitStatsAdmin(SingletonAdmin):
    list_display = ("clients", "directions", "experience", "support")
