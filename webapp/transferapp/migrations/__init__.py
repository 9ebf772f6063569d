"""
webapp.transferapp.migrations
=============================

Пакет миграций Django-приложения `transferapp`.

    python manage.py makemigrations
    python manage.py migrate
"""
