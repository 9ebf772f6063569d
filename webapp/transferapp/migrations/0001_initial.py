import django.core.validators
import django.db.models.deletion
import django.db.models.expressions
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ApplicationRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("name", models.CharField(max_length=255, verbose_name="Имя")),
                ("phone", models.CharField(max_length=50, verbose_name="Телефон")),
                ("contact_method", models.CharField(
                    choices=[("telegram", "Telegram"), ("whatsapp", "WhatsApp"), ("call", "Звонок")],
                    max_length=20,
                    verbose_name="Способ связи",
                )),
                ("status", models.CharField(
                    choices=[("new", "Новая"), ("processing", "В обработке"), ("completed", "Выполнена"), ("canceled", "Отменена")],
                    db_index=True,
                    default="new",
                    max_length=20,
                    verbose_name="Статус",
                )),
            ],
            options={
                "verbose_name": "Быстрая заявка",
                "verbose_name_plural": "Быстрые заявки",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Benefit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255, verbose_name="Заголовок")),
                ("description", models.TextField(verbose_name="Описание")),
                ("icon", models.CharField(max_length=100, verbose_name="Иконка")),
                ("order", models.PositiveIntegerField(db_index=True, default=0, verbose_name="Порядок")),
            ],
            options={
                "verbose_name": "Преимущество",
                "verbose_name_plural": "Преимущества",
                "ordering": ["order", "id"],
            },
        ),
        migrations.CreateModel(
            name="BenefitStats",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("clients", models.CharField(default="5000+", max_length=50, verbose_name="Клиентов")),
                ("directions", models.CharField(default="15+", max_length=50, verbose_name="Направлений")),
                ("experience", models.CharField(default="10+", max_length=50, verbose_name="Лет опыта")),
                ("support", models.CharField(default="24/7", max_length=50, verbose_name="Поддержка")),
            ],
            options={
                "verbose_name": "Статистика преимуществ",
                "verbose_name_plural": "Статистика преимуществ",
            },
        ),
        migrations.CreateModel(
            name="BlogPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("title", models.CharField(max_length=255, verbose_name="Заголовок")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="URL")),
                ("content", models.TextField(verbose_name="Текст")),
                ("excerpt", models.TextField(blank=True, default="", verbose_name="Анонс")),
                ("image_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Изображение")),
                ("is_published", models.BooleanField(db_index=True, default=False, verbose_name="Опубликована")),
                ("published_at", models.DateTimeField(blank=True, null=True, verbose_name="Дата публикации")),
            ],
            options={
                "verbose_name": "Статья блога",
                "verbose_name_plural": "Статьи блога",
                "ordering": [
                    django.db.models.expressions.OrderBy(
                        django.db.models.expressions.F("published_at"), descending=True, nulls_last=True,
                    ),
                    "-created_at",
                ],
            },
        ),
        migrations.CreateModel(
            name="ContactRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("name", models.CharField(max_length=255, verbose_name="Имя")),
                ("email", models.EmailField(max_length=254, verbose_name="Email")),
                ("phone", models.CharField(blank=True, default="", max_length=50, verbose_name="Телефон")),
                ("message", models.TextField(verbose_name="Сообщение")),
                ("status", models.CharField(
                    choices=[("new", "Новая"), ("processing", "В обработке"), ("completed", "Выполнена"), ("canceled", "Отменена")],
                    db_index=True,
                    default="new",
                    max_length=20,
                    verbose_name="Статус",
                )),
            ],
            options={
                "verbose_name": "Обращение",
                "verbose_name_plural": "Обращения (обратная связь)",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="HomeSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("title", models.CharField(
                    default="Комфортные трансферы из Калининграда в Европу", max_length=255, verbose_name="Заголовок",
                )),
                ("subtitle", models.TextField(
                    default="Безопасные и удобные поездки в города Польши, Германии, Литвы и других стран Европы",
                    verbose_name="Подзаголовок",
                )),
                ("background_image_url", models.CharField(
                    default="https://images.unsplash.com/photo-1449965408869-eaa3f722e40d?auto=format&fit=crop&w=2070&q=80",
                    max_length=1000,
                    verbose_name="Фоновое изображение",
                )),
                ("feature1_title", models.CharField(default="Любые направления", max_length=255, verbose_name="Пункт 1: заголовок")),
                ("feature1_text", models.CharField(
                    default="Поездки в основные города Европы по фиксированным ценам", max_length=500, verbose_name="Пункт 1: текст",
                )),
                ("feature1_icon", models.CharField(default="MapPin", max_length=50, verbose_name="Пункт 1: иконка")),
                ("feature2_title", models.CharField(default="Круглосуточно", max_length=255, verbose_name="Пункт 2: заголовок")),
                ("feature2_text", models.CharField(
                    default="Работаем 24/7, включая праздники и выходные дни", max_length=500, verbose_name="Пункт 2: текст",
                )),
                ("feature2_icon", models.CharField(default="Clock", max_length=50, verbose_name="Пункт 2: иконка")),
                ("feature3_title", models.CharField(default="Гарантия качества", max_length=255, verbose_name="Пункт 3: заголовок")),
                ("feature3_text", models.CharField(
                    default="Комфортные автомобили и опытные водители", max_length=500, verbose_name="Пункт 3: текст",
                )),
                ("feature3_icon", models.CharField(default="Check", max_length=50, verbose_name="Пункт 3: иконка")),
            ],
            options={
                "verbose_name": "Главная страница",
                "verbose_name_plural": "Главная страница",
            },
        ),
        migrations.CreateModel(
            name="PhotoGallery",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("title", models.CharField(
                    max_length=255,
                    validators=[django.core.validators.MinLengthValidator(3, "Название должно содержать минимум 3 символа")],
                    verbose_name="Название",
                )),
                ("slug", models.CharField(
                    max_length=255,
                    unique=True,
                    validators=[
                        django.core.validators.RegexValidator(
                            "^[a-z0-9-]+$", "Slug должен содержать только строчные буквы, цифры и дефисы",
                        ),
                        django.core.validators.MinLengthValidator(3, "Slug должен содержать минимум 3 символа"),
                    ],
                    verbose_name="URL",
                )),
                ("description", models.TextField(blank=True, default="", verbose_name="Описание")),
                ("is_published", models.BooleanField(default=False, verbose_name="Опубликована")),
            ],
            options={
                "verbose_name": "Фотогалерея",
                "verbose_name_plural": "Фотогалереи",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("customer_name", models.CharField(max_length=255, verbose_name="Имя клиента")),
                ("rating", models.PositiveSmallIntegerField(
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(5),
                    ],
                    verbose_name="Оценка",
                )),
                ("comment", models.TextField(verbose_name="Текст отзыва")),
                ("image_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Фото клиента")),
                ("review_image_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Фото к отзыву")),
                ("video_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Видео")),
                ("is_published", models.BooleanField(default=False, verbose_name="Опубликован")),
                ("is_approved", models.BooleanField(default=False, verbose_name="Одобрен")),
            ],
            options={
                "verbose_name": "Отзыв",
                "verbose_name_plural": "Отзывы",
                "ordering": ["-id"],
            },
        ),
        migrations.CreateModel(
            name="Route",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("origin_city", models.CharField(max_length=255, verbose_name="Откуда")),
                ("destination_city", models.CharField(max_length=255, verbose_name="Куда")),
                ("distance", models.PositiveIntegerField(verbose_name="Расстояние, км")),
                ("estimated_time", models.CharField(max_length=50, verbose_name="Время в пути")),
                ("price_comfort", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Цена «Комфорт»")),
                ("price_business", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Цена «Бизнес»")),
                ("price_minivan", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Цена «Минивэн»")),
                ("description", models.TextField(blank=True, default="", verbose_name="Описание")),
                ("image_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Изображение")),
                ("popularity_rating", models.PositiveSmallIntegerField(default=1, verbose_name="Популярность")),
                ("is_active", models.BooleanField(default=True, verbose_name="Активен")),
            ],
            options={
                "verbose_name": "Маршрут",
                "verbose_name_plural": "Маршруты",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="SiteSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("phone", models.CharField(default="+7 (900) 000-00-00", max_length=50, verbose_name="Телефон")),
                ("email", models.EmailField(default="info@royaltransfer.ru", max_length=254, verbose_name="Email")),
                ("address", models.CharField(
                    default="г. Калининград, ул. Примерная, д. 123", max_length=500, verbose_name="Адрес",
                )),
                ("working_hours", models.CharField(default="Пн-Вс: 24/7", max_length=255, verbose_name="Часы работы")),
                ("company_name", models.CharField(default="RoyalTransfer", max_length=255, verbose_name="Название компании")),
                ("company_desc", models.TextField(
                    default="Комфортные трансферы из Калининграда в города Европы. "
                            "Безопасность, комфорт и пунктуальность.",
                    verbose_name="Описание компании",
                )),
                ("instagram_link", models.CharField(default="#", max_length=500, verbose_name="Instagram")),
                ("telegram_link", models.CharField(default="#", max_length=500, verbose_name="Telegram")),
                ("whatsapp_link", models.CharField(default="#", max_length=500, verbose_name="WhatsApp")),
                ("header_logo_url", models.CharField(blank=True, max_length=1000, null=True, verbose_name="Логотип в шапке")),
                ("footer_logo_url", models.CharField(blank=True, max_length=1000, null=True, verbose_name="Логотип в подвале")),
                ("google_maps_api_key", models.CharField(
                    blank=True, max_length=255, null=True, verbose_name="Ключ Google Maps API",
                )),
            ],
            options={
                "verbose_name": "Настройки сайта",
                "verbose_name_plural": "Настройки сайта",
            },
        ),
        migrations.CreateModel(
            name="TransferConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("title", models.CharField(default="Заказать трансфер", max_length=255, verbose_name="Заголовок")),
                ("description", models.TextField(
                    default="Заполните форму ниже, и мы свяжемся с вами для подтверждения заказа",
                    verbose_name="Описание",
                )),
                ("use_vehicles_from_db", models.BooleanField(default=True, verbose_name="Брать автомобили из автопарка")),
                ("vehicle_options", models.JSONField(blank=True, default=list, verbose_name="Варианты автомобилей")),
                ("custom_image_urls", models.JSONField(blank=True, default=dict, verbose_name="Свои изображения")),
            ],
            options={
                "verbose_name": "Настройки заказа трансфера",
                "verbose_name_plural": "Настройки заказа трансфера",
            },
        ),
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("vehicle_class", models.CharField(max_length=100, verbose_name="Класс")),
                ("brand", models.CharField(max_length=100, verbose_name="Марка")),
                ("model", models.CharField(max_length=100, verbose_name="Модель")),
                ("year", models.PositiveSmallIntegerField(verbose_name="Год выпуска")),
                ("seats", models.PositiveSmallIntegerField(verbose_name="Мест")),
                ("description", models.TextField(blank=True, default="", verbose_name="Описание")),
                ("image_url", models.CharField(blank=True, default="", max_length=1000, verbose_name="Фото")),
                ("amenities", models.TextField(blank=True, default="", verbose_name="Удобства")),
                ("price", models.DecimalField(
                    blank=True, decimal_places=2, max_digits=10, null=True, verbose_name="Цена от, EUR",
                )),
                ("is_active", models.BooleanField(default=True, verbose_name="Активен")),
            ],
            options={
                "verbose_name": "Автомобиль",
                "verbose_name_plural": "Автомобили",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="GalleryPhoto",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.URLField(max_length=1000, verbose_name="URL изображения")),
                ("title", models.CharField(blank=True, default="", max_length=255, verbose_name="Подпись")),
                ("description", models.TextField(blank=True, default="", verbose_name="Описание")),
                ("order", models.PositiveIntegerField(default=0, verbose_name="Порядок")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("gallery", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="photos",
                    to="transferapp.photogallery",
                    verbose_name="Галерея",
                )),
            ],
            options={
                "verbose_name": "Фотография",
                "verbose_name_plural": "Фотографии",
                "ordering": ["order", "id"],
            },
        ),
        migrations.CreateModel(
            name="TransferRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("customer_name", models.CharField(max_length=255, verbose_name="Имя клиента")),
                ("customer_phone", models.CharField(max_length=50, verbose_name="Телефон клиента")),
                ("vehicle_class", models.CharField(blank=True, default="", max_length=100, verbose_name="Класс автомобиля")),
                ("date", models.DateField(verbose_name="Дата поездки")),
                ("time", models.TimeField(blank=True, null=True, verbose_name="Время подачи")),
                ("origin_city", models.CharField(blank=True, default="", max_length=255, verbose_name="Город отправления")),
                ("origin_address", models.CharField(blank=True, default="", max_length=500, verbose_name="Адрес отправления")),
                ("destination_city", models.CharField(blank=True, default="", max_length=255, verbose_name="Город прибытия")),
                ("destination_address", models.CharField(blank=True, default="", max_length=500, verbose_name="Адрес прибытия")),
                ("tell_driver", models.BooleanField(default=False, verbose_name="Адрес сообщу водителю")),
                ("payment_method", models.CharField(
                    choices=[("cash", "Наличные"), ("card", "Карта"), ("online", "Онлайн")],
                    default="cash",
                    max_length=20,
                    verbose_name="Способ оплаты",
                )),
                ("return_transfer", models.BooleanField(default=False, verbose_name="Обратный трансфер")),
                ("return_date", models.DateField(blank=True, null=True, verbose_name="Дата обратного трансфера")),
                ("return_time", models.TimeField(blank=True, null=True, verbose_name="Время обратного трансфера")),
                ("comments", models.TextField(blank=True, default="", verbose_name="Комментарий")),
                ("status", models.CharField(
                    choices=[("new", "Новая"), ("processing", "В обработке"), ("completed", "Выполнена"), ("canceled", "Отменена")],
                    db_index=True,
                    default="new",
                    max_length=20,
                    verbose_name="Статус",
                )),
                ("vehicle", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="transfer_requests",
                    to="transferapp.vehicle",
                    verbose_name="Автомобиль",
                )),
            ],
            options={
                "verbose_name": "Заказ трансфера",
                "verbose_name_plural": "Заказы трансферов",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
