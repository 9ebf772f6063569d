"""
manage.py
==========

Командный интерфейс Django-проекта **RoyalTransfer**.

Примеры использования:
----------------------
1. **Запуск сервера разработки**
    python manage.py runserver

2. **Применение миграций**
    python manage.py migrate

3. **Создание администратора (для /admin/ и записи через API)**
    python manage.py createsuperuser

Скрипт задаёт переменную окружения `DJANGO_SETTINGS_MODULE`
(`royaltransfer.settings`) и передаёт аргументы в
`django.core.management.execute_from_command_line()`.
"""

import os
import sys


def main() -> None:
    """
    Точка входа командной оболочки Django.

    При ошибках импорта Django выводит понятное сообщение пользователю.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "royaltransfer.settings")

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Не удалось импортировать Django. "
            "Убедитесь, что оно установлено и доступно в текущем окружении."
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
