"""
settings.py
============

Глобальные настройки Django-проекта **RoyalTransfer**.

Назначение:
- определяет конфигурацию Django (БД, middleware, приложения, почта, логи);
- связывает публичный сайт, админку и REST API через общую БД;
- используется при запуске как через `manage.py`, так и при WSGI-развёртывании.

Все ключи и пароли читаются из переменных окружения. Значения по умолчанию
подходят только для локальной разработки.
"""

import os
from pathlib import Path


def env(key: str, default: str = "") -> str:
    """
    Прочитать переменную окружения, убрав пробелы и случайные CR/LF.

    .env-файлы, сохранённые в Windows, часто приносят `\\r` в конец значения.
    """
    value = os.getenv(key)
    if value is None:
        return default
    return value.replace("\r", "").replace("\n", "").replace("\t", "").strip()


def env_bool(key: str, default: bool = False) -> bool:
    value = env(key).lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


def env_int(key: str, default: int) -> int:
    try:
        return int(env(key))
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Базовая конфигурация проекта
# ---------------------------------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env("DJANGO_SECRET_KEY", "dev-secret-key-change-this")  # заменить для продакшена
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [
    host.strip()
    for host in env("DJANGO_ALLOWED_HOSTS", "127.0.0.1,localhost,testserver").split(",")
    if host.strip()
]


# ---------------------------------------------------------------------------
# Приложения (Django apps)
# ---------------------------------------------------------------------------

INSTALLED_APPS = [
    # --- системные приложения Django ---
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django.contrib.sitemaps",

    # --- кастомные приложения проекта ---
    "transferapp",   # контент сайта, заявки, настройки

    # --- сторонние библиотеки ---
    "rest_framework",
]


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]


# ---------------------------------------------------------------------------
# URL / Templates / WSGI
# ---------------------------------------------------------------------------

ROOT_URLCONF = "royaltransfer.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "transferapp.context_processors.site_settings",
            ],
        },
    },
]

WSGI_APPLICATION = "royaltransfer.wsgi.application"


# ---------------------------------------------------------------------------
# База данных
# ---------------------------------------------------------------------------

# В продакшене — PostgreSQL (psycopg2), локально и в тестах — SQLite.
if env("DB_ENGINE", "sqlite") == "postgresql":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": env("DB_NAME", "royaltransfer_db"),
            "USER": env("DB_USER", "royaltransfer_user"),
            "PASSWORD": env("DB_PASSWORD", "royaltransfer_password"),
            "HOST": env("DB_HOST", "localhost"),
            "PORT": env("DB_PORT", "5432"),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / env("DB_NAME", "db.sqlite3"),
        }
    }


# ---------------------------------------------------------------------------
# Аутентификация и безопасность
# ---------------------------------------------------------------------------

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LOGIN_URL = "admin:login"


# ---------------------------------------------------------------------------
# REST API
# ---------------------------------------------------------------------------

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAdminUser",
    ],
    "EXCEPTION_HANDLER": "transferapp.api.exceptions.api_exception_handler",
}

# размер страницы для списков заявок (?limit= может переопределить, но не выше 100)
API_PAGE_SIZE = env_int("API_PAGE_SIZE", 10)


# ---------------------------------------------------------------------------
# Локализация и время
# ---------------------------------------------------------------------------

LANGUAGE_CODE = "ru-ru"
TIME_ZONE = "Europe/Kaliningrad"

USE_I18N = True
USE_TZ = True  # хранение в UTC, отображение в локальном времени


# ---------------------------------------------------------------------------
# Статика
# ---------------------------------------------------------------------------

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"


# ---------------------------------------------------------------------------
# Почта (уведомления о заявках с формы обратной связи)
# ---------------------------------------------------------------------------

EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
EMAIL_HOST = env("SMTP_HOST")
EMAIL_PORT = env_int("SMTP_PORT", 465)
EMAIL_HOST_USER = env("SMTP_USER")
EMAIL_HOST_PASSWORD = env("SMTP_PASSWORD")
# SMTP_SECURE=true — неявный SSL (порт 465), иначе STARTTLS не включаем
EMAIL_USE_SSL = env_bool("SMTP_SECURE", False)
EMAIL_TIMEOUT = 15
DEFAULT_FROM_EMAIL = env("SMTP_FROM") or EMAIL_HOST_USER or "webmaster@localhost"

# адрес(а) для уведомлений, через запятую
CONTACT_FORM_EMAIL = [
    address.strip()
    for address in env("CONTACT_FORM_EMAIL").split(",")
    if address.strip()
]
CONTACT_FORM_SENDER_NAME = "Royal Transfer Сайт"


# ---------------------------------------------------------------------------
# Логирование
# ---------------------------------------------------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": env("LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}


# ---------------------------------------------------------------------------
# Прочее
# ---------------------------------------------------------------------------

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Публичный адрес сайта: абсолютные ссылки в sitemap, RSS и JSON-LD
SITE_BASE_URL = env("SITE_BASE_URL", "https://royaltransfer.org").rstrip("/")
