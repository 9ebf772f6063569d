"""
models.py
=========

ORM-модели приложения `transferapp`.

Группы сущностей:

1. **Заявки с сайта** — ContactRequest, ApplicationRequest, TransferRequest.
   Создаются публичными формами, обрабатываются в админке через статус
   (`new` → `processing` → `completed` / `canceled`).

2. **Контент** — BlogPost, Review, Benefit, Vehicle, Route,
   PhotoGallery / GalleryPhoto. Редактируется администратором,
   выводится на публичных страницах.

3. **Настройки (одна строка на таблицу)** — SiteSettings, HomeSettings,
   TransferConfig, BenefitStats. Строка `pk=1` создаётся со значениями
   по умолчанию при первом обращении (см. `SingletonModel.load`).
"""
from __future__ import annotations

import logging

from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models
from django.db.models import F
from django.utils import timezone

from .utils import make_slug, unique_slug

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Общие базовые классы
# ---------------------------------------------------------------------------

class TimestampedModel(models.Model):
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    class Meta:
        abstract = True


class SingletonModel(models.Model):
    """
    Таблица из одной строки (pk=1) — глобальные настройки.

    Значения по умолчанию задаются через `default=` у полей, поэтому
    `load()` может создать строку без дополнительных параметров.
    """

    SINGLETON_PK = 1

    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Вернуть строку настроек, создав её со значениями по умолчанию."""
        obj, created = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        if created:
            logger.info("%s: созданы настройки по умолчанию", cls.__name__)
        return obj


class RequestStatus(models.TextChoices):
    """Статусы обработки заявок."""
    NEW = "new", "Новая"
    PROCESSING = "processing", "В обработке"
    COMPLETED = "completed", "Выполнена"
    CANCELED = "canceled", "Отменена"


# ---------------------------------------------------------------------------
# Заявки с сайта
# ---------------------------------------------------------------------------

class ContactRequest(TimestampedModel):
    """Сообщение из формы обратной связи. После сохранения уходит письмо менеджеру."""

    name = models.CharField("Имя", max_length=255)
    email = models.EmailField("Email")
    phone = models.CharField("Телефон", max_length=50, blank=True, default="")
    message = models.TextField("Сообщение")
    status = models.CharField(
        "Статус",
        max_length=20,
        choices=RequestStatus.choices,
        default=RequestStatus.NEW,
        db_index=True,
    )

    class Meta:
        verbose_name = "Обращение"
        verbose_name_plural = "Обращения (обратная связь)"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"#{self.pk} {self.name} <{self.email}> [{self.get_status_display()}]"


class ApplicationRequest(TimestampedModel):
    """Быстрая заявка «перезвоните мне» с выбором мессенджера."""

    class ContactMethod(models.TextChoices):
        TELEGRAM = "telegram", "Telegram"
        WHATSAPP = "whatsapp", "WhatsApp"
        CALL = "call", "Звонок"

    name = models.CharField("Имя", max_length=255)
    phone = models.CharField("Телефон", max_length=50)
    contact_method = models.CharField(
        "Способ связи",
        max_length=20,
        choices=ContactMethod.choices,
    )
    status = models.CharField(
        "Статус",
        max_length=20,
        choices=RequestStatus.choices,
        default=RequestStatus.NEW,
        db_index=True,
    )

    class Meta:
        verbose_name = "Быстрая заявка"
        verbose_name_plural = "Быстрые заявки"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"#{self.pk} {self.name} {self.phone} ({self.get_contact_method_display()})"


class TransferRequest(TimestampedModel):
    """Заказ трансфера из формы бронирования."""

    class PaymentMethod(models.TextChoices):
        CASH = "cash", "Наличные"
        CARD = "card", "Карта"
        ONLINE = "online", "Онлайн"

    customer_name = models.CharField("Имя клиента", max_length=255)
    customer_phone = models.CharField("Телефон клиента", max_length=50)
    vehicle_class = models.CharField("Класс автомобиля", max_length=100, blank=True, default="")
    vehicle = models.ForeignKey(
        "transferapp.Vehicle",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="transfer_requests",
        verbose_name="Автомобиль",
    )

    date = models.DateField("Дата поездки")
    time = models.TimeField("Время подачи", null=True, blank=True)
    origin_city = models.CharField("Город отправления", max_length=255, blank=True, default="")
    origin_address = models.CharField("Адрес отправления", max_length=500, blank=True, default="")
    destination_city = models.CharField("Город прибытия", max_length=255, blank=True, default="")
    destination_address = models.CharField("Адрес прибытия", max_length=500, blank=True, default="")
    tell_driver = models.BooleanField("Адрес сообщу водителю", default=False)
    payment_method = models.CharField(
        "Способ оплаты",
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH,
    )

    return_transfer = models.BooleanField("Обратный трансфер", default=False)
    return_date = models.DateField("Дата обратного трансфера", null=True, blank=True)
    return_time = models.TimeField("Время обратного трансфера", null=True, blank=True)

    comments = models.TextField("Комментарий", blank=True, default="")
    status = models.CharField(
        "Статус",
        max_length=20,
        choices=RequestStatus.choices,
        default=RequestStatus.NEW,
        db_index=True,
    )

    class Meta:
        verbose_name = "Заказ трансфера"
        verbose_name_plural = "Заказы трансферов"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        route = f"{self.origin_city or '?'} → {self.destination_city or '?'}"
        return f"#{self.pk} {self.customer_name}: {route} {self.date}"


# ---------------------------------------------------------------------------
# Блог
# ---------------------------------------------------------------------------

class BlogPost(TimestampedModel):
    """
    Статья блога.

    - slug генерируется из заголовка (с транслитерацией), если не задан;
    - published_at проставляется при первой публикации и дальше не меняется.
    """

    SLUG_MAX_LENGTH = 50

    title = models.CharField("Заголовок", max_length=255)
    slug = models.SlugField("URL", max_length=255, unique=True, blank=True)
    content = models.TextField("Текст")
    excerpt = models.TextField("Анонс", blank=True, default="")
    image_url = models.CharField("Изображение", max_length=1000, blank=True, default="")
    is_published = models.BooleanField("Опубликована", default=False, db_index=True)
    published_at = models.DateTimeField("Дата публикации", null=True, blank=True)

    class Meta:
        verbose_name = "Статья блога"
        verbose_name_plural = "Статьи блога"
        ordering = [F("published_at").desc(nulls_last=True), "-created_at"]

    def __str__(self) -> str:
        return self.title

    def save(self, *args, **kwargs) -> None:
        if not self.slug:
            self.slug = unique_slug(
                BlogPost.objects.exclude(pk=self.pk),
                make_slug(self.title, max_length=self.SLUG_MAX_LENGTH),
                max_length=self.SLUG_MAX_LENGTH,
            )
        if self.is_published and self.published_at is None:
            self.published_at = timezone.now()
        super().save(*args, **kwargs)

    def get_absolute_url(self) -> str:
        return f"/blog/{self.slug}/"


# ---------------------------------------------------------------------------
# Отзывы
# ---------------------------------------------------------------------------

class ReviewQuerySet(models.QuerySet):
    def visible(self) -> "ReviewQuerySet":
        """Отзывы, которые можно показывать на сайте (одобрены и опубликованы)."""
        return self.filter(is_published=True, is_approved=True)


class Review(TimestampedModel):
    """Отзыв клиента. Новые отзывы скрыты до одобрения администратором."""

    customer_name = models.CharField("Имя клиента", max_length=255)
    rating = models.PositiveSmallIntegerField(
        "Оценка",
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    comment = models.TextField("Текст отзыва")
    image_url = models.CharField("Фото клиента", max_length=1000, blank=True, default="")
    review_image_url = models.CharField("Фото к отзыву", max_length=1000, blank=True, default="")
    video_url = models.CharField("Видео", max_length=1000, blank=True, default="")
    is_published = models.BooleanField("Опубликован", default=False)
    is_approved = models.BooleanField("Одобрен", default=False)

    objects = ReviewQuerySet.as_manager()

    class Meta:
        verbose_name = "Отзыв"
        verbose_name_plural = "Отзывы"
        ordering = ["-id"]

    def __str__(self) -> str:
        return f"{self.customer_name} ({self.rating}★)"


# ---------------------------------------------------------------------------
# Преимущества
# ---------------------------------------------------------------------------

class Benefit(models.Model):
    """Карточка блока «Почему мы». Порядок — 1..n без пропусков."""

    title = models.CharField("Заголовок", max_length=255)
    description = models.TextField("Описание")
    icon = models.CharField("Иконка", max_length=100)
    order = models.PositiveIntegerField("Порядок", default=0, db_index=True)

    class Meta:
        verbose_name = "Преимущество"
        verbose_name_plural = "Преимущества"
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return f"{self.order}. {self.title}"


class BenefitStats(SingletonModel):
    """Цифры под блоком преимуществ."""

    clients = models.CharField("Клиентов", max_length=50, default="5000+")
    directions = models.CharField("Направлений", max_length=50, default="15+")
    experience = models.CharField("Лет опыта", max_length=50, default="10+")
    support = models.CharField("Поддержка", max_length=50, default="24/7")

    class Meta:
        verbose_name = "Статистика преимуществ"
        verbose_name_plural = "Статистика преимуществ"

    def __str__(self) -> str:
        return "Статистика преимуществ"


# ---------------------------------------------------------------------------
# Автопарк и маршруты
# ---------------------------------------------------------------------------

class Vehicle(TimestampedModel):
    vehicle_class = models.CharField("Класс", max_length=100)
    brand = models.CharField("Марка", max_length=100)
    model = models.CharField("Модель", max_length=100)
    year = models.PositiveSmallIntegerField("Год выпуска")
    seats = models.PositiveSmallIntegerField("Мест")
    description = models.TextField("Описание", blank=True, default="")
    image_url = models.CharField("Фото", max_length=1000, blank=True, default="")
    amenities = models.TextField("Удобства", blank=True, default="")
    price = models.DecimalField("Цена от, EUR", max_digits=10, decimal_places=2, null=True, blank=True)
    is_active = models.BooleanField("Активен", default=True)

    class Meta:
        verbose_name = "Автомобиль"
        verbose_name_plural = "Автомобили"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.vehicle_class}: {self.brand} {self.model} ({self.year})"


class Route(TimestampedModel):
    origin_city = models.CharField("Откуда", max_length=255)
    destination_city = models.CharField("Куда", max_length=255)
    distance = models.PositiveIntegerField("Расстояние, км")
    estimated_time = models.CharField("Время в пути", max_length=50)
    price_comfort = models.DecimalField("Цена «Комфорт»", max_digits=10, decimal_places=2, default=0)
    price_business = models.DecimalField("Цена «Бизнес»", max_digits=10, decimal_places=2, default=0)
    price_minivan = models.DecimalField("Цена «Минивэн»", max_digits=10, decimal_places=2, default=0)
    description = models.TextField("Описание", blank=True, default="")
    image_url = models.CharField("Изображение", max_length=1000, blank=True, default="")
    popularity_rating = models.PositiveSmallIntegerField("Популярность", default=1)
    is_active = models.BooleanField("Активен", default=True)

    class Meta:
        verbose_name = "Маршрут"
        verbose_name_plural = "Маршруты"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.origin_city} — {self.destination_city}"

    def get_absolute_url(self) -> str:
        return f"/routes/{self.pk}/"

    @property
    def min_price(self):
        prices = [p for p in (self.price_comfort, self.price_business, self.price_minivan) if p]
        return min(prices) if prices else None


# ---------------------------------------------------------------------------
# Фотогалереи
# ---------------------------------------------------------------------------

gallery_slug_validator = RegexValidator(
    r"^[a-z0-9-]+$",
    "Slug должен содержать только строчные буквы, цифры и дефисы",
)


class PhotoGallery(TimestampedModel):
    title = models.CharField(
        "Название",
        max_length=255,
        validators=[MinLengthValidator(3, "Название должно содержать минимум 3 символа")],
    )
    slug = models.CharField(
        "URL",
        max_length=255,
        unique=True,
        validators=[
            gallery_slug_validator,
            MinLengthValidator(3, "Slug должен содержать минимум 3 символа"),
        ],
    )
    description = models.TextField("Описание", blank=True, default="")
    is_published = models.BooleanField("Опубликована", default=False)

    class Meta:
        verbose_name = "Фотогалерея"
        verbose_name_plural = "Фотогалереи"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return f"/gallery/{self.slug}/"

    def next_photo_order(self) -> int:
        """Порядковый номер для новой фотографии: последний + 1, либо 0."""
        last = self.photos.order_by("-order").values_list("order", flat=True).first()
        return 0 if last is None else last + 1


class GalleryPhoto(models.Model):
    gallery = models.ForeignKey(
        PhotoGallery,
        on_delete=models.CASCADE,
        related_name="photos",
        verbose_name="Галерея",
    )
    url = models.URLField("URL изображения", max_length=1000)
    title = models.CharField("Подпись", max_length=255, blank=True, default="")
    description = models.TextField("Описание", blank=True, default="")
    order = models.PositiveIntegerField("Порядок", default=0)
    created_at = models.DateTimeField("Создано", auto_now_add=True)

    class Meta:
        verbose_name = "Фотография"
        verbose_name_plural = "Фотографии"
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return self.title or self.url


# ---------------------------------------------------------------------------
# Настройки сайта
# ---------------------------------------------------------------------------

class TransferConfig(SingletonModel):
    """
    Настройки модального окна заказа трансфера.

    vehicle_options — список вариантов авто, если не берём их из БД:
        [{"value": "comfort", "label": "Комфорт", "price": "...", "image": "...", "desc": "..."}]
    custom_image_urls — подмена картинок по ключу value: {"comfort": "https://..."}
    """

    title = models.CharField("Заголовок", max_length=255, default="Заказать трансфер")
    description = models.TextField(
        "Описание",
        default="Заполните форму ниже, и мы свяжемся с вами для подтверждения заказа",
    )
    use_vehicles_from_db = models.BooleanField("Брать автомобили из автопарка", default=True)
    vehicle_options = models.JSONField("Варианты автомобилей", default=list, blank=True)
    custom_image_urls = models.JSONField("Свои изображения", default=dict, blank=True)

    class Meta:
        verbose_name = "Настройки заказа трансфера"
        verbose_name_plural = "Настройки заказа трансфера"

    def __str__(self) -> str:
        return "Настройки заказа трансфера"


class SiteSettings(SingletonModel):
    """Контакты, соцсети, логотипы и ключ карт — общие для всех страниц."""

    phone = models.CharField("Телефон", max_length=50, default="+7 (900) 000-00-00")
    email = models.EmailField("Email", default="info@royaltransfer.ru")
    address = models.CharField(
        "Адрес", max_length=500, default="г. Калининград, ул. Примерная, д. 123",
    )
    working_hours = models.CharField("Часы работы", max_length=255, default="Пн-Вс: 24/7")
    company_name = models.CharField("Название компании", max_length=255, default="RoyalTransfer")
    company_desc = models.TextField(
        "Описание компании",
        default="Комфортные трансферы из Калининграда в города Европы. "
                "Безопасность, комфорт и пунктуальность.",
    )
    instagram_link = models.CharField("Instagram", max_length=500, default="#")
    telegram_link = models.CharField("Telegram", max_length=500, default="#")
    whatsapp_link = models.CharField("WhatsApp", max_length=500, default="#")
    header_logo_url = models.CharField("Логотип в шапке", max_length=1000, null=True, blank=True)
    footer_logo_url = models.CharField("Логотип в подвале", max_length=1000, null=True, blank=True)
    google_maps_api_key = models.CharField(
        "Ключ Google Maps API", max_length=255, null=True, blank=True,
    )

    class Meta:
        verbose_name = "Настройки сайта"
        verbose_name_plural = "Настройки сайта"

    def __str__(self) -> str:
        return "Настройки сайта"


class HomeSettings(SingletonModel):
    """Тексты первого экрана главной страницы."""

    title = models.CharField(
        "Заголовок", max_length=255,
        default="Комфортные трансферы из Калининграда в Европу",
    )
    subtitle = models.TextField(
        "Подзаголовок",
        default="Безопасные и удобные поездки в города Польши, Германии, Литвы "
                "и других стран Европы",
    )
    background_image_url = models.CharField(
        "Фоновое изображение", max_length=1000,
        default="https://images.unsplash.com/photo-1449965408869-eaa3f722e40d"
                "?auto=format&fit=crop&w=2070&q=80",
    )
    feature1_title = models.CharField("Пункт 1: заголовок", max_length=255, default="Любые направления")
    feature1_text = models.CharField(
        "Пункт 1: текст", max_length=500,
        default="Поездки в основные города Европы по фиксированным ценам",
    )
    feature1_icon = models.CharField("Пункт 1: иконка", max_length=50, default="MapPin")
    feature2_title = models.CharField("Пункт 2: заголовок", max_length=255, default="Круглосуточно")
    feature2_text = models.CharField(
        "Пункт 2: текст", max_length=500,
        default="Работаем 24/7, включая праздники и выходные дни",
    )
    feature2_icon = models.CharField("Пункт 2: иконка", max_length=50, default="Clock")
    feature3_title = models.CharField("Пункт 3: заголовок", max_length=255, default="Гарантия качества")
    feature3_text = models.CharField(
        "Пункт 3: текст", max_length=500,
        default="Комфортные автомобили и опытные водители",
    )
    feature3_icon = models.CharField("Пункт 3: иконка", max_length=50, default="Check")

    class Meta:
        verbose_name = "Главная страница"
        verbose_name_plural = "Главная страница"

    def __str__(self) -> str:
        return "Настройки главной страницы"

    @property
    def features(self) -> list[dict]:
        return [
            {
                "title": getattr(self, f"feature{i}_title"),
                "text": getattr(self, f"feature{i}_text"),
                "icon": getattr(self, f"feature{i}_icon"),
            }
            for i in (1, 2, 3)
        ]
