"""
notifications.py
================

Email-уведомления менеджеру о новых заявках с сайта.

Отправка «по возможности»: заявка уже сохранена в БД, поэтому ошибка SMTP
или отсутствие настроек почты только логируются и не влияют на ответ
клиенту. Вызывается из API через `transaction.on_commit`.

Настройки (см. settings.py, значения из переменных окружения):
- EMAIL_HOST / EMAIL_PORT / EMAIL_HOST_USER / EMAIL_HOST_PASSWORD / EMAIL_USE_SSL;
- DEFAULT_FROM_EMAIL — адрес отправителя (SMTP_FROM или SMTP_USER);
- CONTACT_FORM_EMAIL — список получателей.
"""

from __future__ import annotations

import logging
import re
import smtplib

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .models import ContactRequest

logger = logging.getLogger(__name__)


def _phone_href(phone: str) -> str:
    """+7 (906) 219-99-17 → +79062199917 — для ссылки tel:."""
    return re.sub(r"[\s()-]", "", phone)


def build_contact_request_email(contact_request: ContactRequest) -> EmailMultiAlternatives:
    """
    Собрать письмо о новом обращении: текстовая версия + HTML-альтернатива.

    Reply-To — адрес клиента, чтобы менеджер мог ответить прямо из почты.
    """
    context = {
        "request": contact_request,
        "phone_href": _phone_href(contact_request.phone) if contact_request.phone else "",
    }
    message = EmailMultiAlternatives(
        subject=f"Новая заявка с сайта Royal Transfer от {contact_request.name}",
        body=render_to_string("transferapp/email/contact_request.txt", context),
        from_email=f'"{settings.CONTACT_FORM_SENDER_NAME}" <{settings.DEFAULT_FROM_EMAIL}>',
        to=list(settings.CONTACT_FORM_EMAIL),
        reply_to=[contact_request.email],
    )
    message.attach_alternative(
        render_to_string("transferapp/email/contact_request.html", context),
        "text/html",
    )
    return message


def notify_new_contact_request(contact_request: ContactRequest) -> bool:
    """
    Отправить менеджеру уведомление о новом обращении.

    :param contact_request: уже сохранённая заявка
    :return: True — письмо отправлено; False — почта не настроена или SMTP-ошибка
    """
    if not settings.CONTACT_FORM_EMAIL:
        logger.warning(
            "Почта не настроена (CONTACT_FORM_EMAIL пуст): письмо по заявке %s не отправлено",
            contact_request.pk,
        )
        return False

    try:
        build_contact_request_email(contact_request).send(fail_silently=False)
    except (smtplib.SMTPException, OSError):
        logger.exception("Ошибка при отправке email для заявки %s", contact_request.pk)
        return False

    logger.info(
        "Email уведомление для заявки %s отправлено на %s",
        contact_request.pk,
        ", ".join(settings.CONTACT_FORM_EMAIL),
    )
    return True
