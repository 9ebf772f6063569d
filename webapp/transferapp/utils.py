"""
utils.py
========

Служебные функции приложения `transferapp`.

Содержит три логические группы:

1) Slug-и:
   - транслитерация кириллицы и построение slug из заголовка;
   - подбор уникального slug с числовым суффиксом.

2) Отзывы:
   - средняя оценка для витрины и JSON-LD.

3) Модальное окно заказа трансфера:
   - список вариантов автомобилей (из автопарка или из настроек),
     с подменой изображений.

Модуль не импортирует модели — модели сами используют функции slug-ов.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from django.db.models import Avg, QuerySet
from django.utils.text import slugify

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SLUG: транслитерация и уникальность
# ---------------------------------------------------------------------------

TRANSLIT = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sch", "ъ": "",
    "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}


def transliterate(text: str) -> str:
    """Заменить русские буквы латиницей, остальные символы оставить как есть."""
    return "".join(TRANSLIT.get(ch, ch) for ch in text.lower())


def make_slug(title: str, max_length: int = 50) -> str:
    """
    Построить slug из заголовка.

    «Поездка в Гданьск!» → "poezdka-v-gdansk"

    :param title: исходный заголовок (может быть на русском)
    :param max_length: максимальная длина результата
    :return: slug из [a-z0-9-], без дефисов по краям
    """
    slug = slugify(transliterate(title))[:max_length]
    return slug.strip("-")


def unique_slug(queryset: QuerySet, base: str, max_length: int = 50, field: str = "slug") -> str:
    """
    Подобрать slug, не занятый в `queryset`: base, base-2, base-3, ...

    :param queryset: записи, среди которых slug должен быть уникален
                     (текущую запись вызывающий код исключает сам)
    :param base: желаемый slug
    :param max_length: ограничение длины (суффикс помещается внутрь)
    :param field: имя поля со slug-ом
    """
    base = base or "post"
    candidate = base[:max_length]
    n = 2
    while queryset.filter(**{field: candidate}).exists():
        suffix = f"-{n}"
        candidate = f"{base[:max_length - len(suffix)].rstrip('-')}{suffix}"
        n += 1
    return candidate


# ---------------------------------------------------------------------------
# ОТЗЫВЫ: средняя оценка
# ---------------------------------------------------------------------------

def average_rating(reviews: QuerySet) -> Optional[float]:
    """
    Средняя оценка по набору отзывов, округлённая до десятых.

    :return: float или None, если отзывов нет
    """
    value = reviews.aggregate(avg=Avg("rating"))["avg"]
    if value is None:
        return None
    return round(float(value), 1)


# ---------------------------------------------------------------------------
# ЗАКАЗ ТРАНСФЕРА: варианты автомобилей
# ---------------------------------------------------------------------------

def format_price_label(price: Optional[Decimal]) -> str:
    if price is None:
        return "по запросу"
    return f"от {price:.2f} EUR"


def build_vehicle_options(config, active_vehicles: Iterable) -> List[Dict[str, Any]]:
    """
    Собрать список вариантов автомобилей для формы заказа.

    Если в настройках включено `use_vehicles_from_db` — берём активные
    автомобили автопарка, иначе — сохранённый в настройках список.
    После этого применяем `custom_image_urls` (подмена картинки по `value`).

    :param config: объект TransferConfig
    :param active_vehicles: активные Vehicle (используются только при use_vehicles_from_db)
    :return: список словарей {value, label, price, image, desc[, vehicle_id]}
    """
    if config.use_vehicles_from_db:
        options = [
            {
                "value": make_slug(vehicle.vehicle_class, max_length=100),
                "label": vehicle.vehicle_class,
                "price": format_price_label(vehicle.price),
                "image": vehicle.image_url or None,
                "desc": f"{vehicle.brand} {vehicle.model}",
                "vehicle_id": vehicle.id,
            }
            for vehicle in active_vehicles
        ]
    elif isinstance(config.vehicle_options, list):
        options = [dict(item) for item in config.vehicle_options if isinstance(item, dict)]
    else:
        logger.warning("TransferConfig.vehicle_options is not a list: %r", config.vehicle_options)
        options = []

    custom_images = config.custom_image_urls if isinstance(config.custom_image_urls, dict) else {}
    for option in options:
        custom_image = custom_images.get(option.get("value"))
        if custom_image:
            option["image"] = custom_image
    return options


__all__ = [
    # Slug-и
    "transliterate",
    "make_slug",
    "unique_slug",
    # Отзывы
    "average_rating",
    # Заказ трансфера
    "format_price_label",
    "build_vehicle_options",
]
