"""
views.py (API)
==============

DRF-представления ресурсов сайта.

Заявки (публичный POST, остальное — администратор):
- ContactRequestViewSet: обратная связь, после сохранения — письмо менеджеру
- ApplicationRequestViewSet: быстрые заявки «перезвоните мне»
- TransferRequestViewSet: заказы трансфера

Контент (чтение — всем, изменение — администратору):
- BlogPostViewSet, ReviewViewSet, BenefitViewSet, VehicleViewSet, RouteViewSet
- PhotoGalleryViewSet, GalleryPhotoViewSet

Настройки (одна строка на таблицу):
- SiteSettingsView, HomeSettingsView, TransferConfigView, BenefitStatsView

Администратор — is_staff пользователь с сессией админки. Посетитель видит
только опубликованное/активное; администратор в списках видит всё
с параметром `?show_all=true`, а в карточке — всегда.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from django.db import transaction
from django.db.models import Count, Max, QuerySet
from django.shortcuts import get_object_or_404
from rest_framework import generics, mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response

from transferapp.models import (
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
from transferapp.notifications import notify_new_contact_request
from transferapp.utils import average_rating, build_vehicle_options
from .pagination import RequestPagination
from .permissions import IsAdminOrReadOnly, IsCreateAction, is_staff, show_all_requested
from .serializers import (
    ApplicationRequestSerializer,
    BenefitSerializer,
    BenefitStatsSerializer,
    BlogPostSerializer,
    ContactRequestSerializer,
    GalleryPhotoSerializer,
    HomeSettingsSerializer,
    PhotoGalleryDetailSerializer,
    PhotoGallerySerializer,
    ReviewApproveSerializer,
    ReviewSerializer,
    RouteSerializer,
    SiteSettingsSerializer,
    TransferConfigSerializer,
    TransferRequestSerializer,
    VehicleSerializer,
)

logger = logging.getLogger(__name__)

FEATURED_POSTS_LIMIT = 3


# -------- Общие примеси --------

class StatusFilterMixin:
    """Фильтр списка заявок по `?status=`. Неизвестный статус — 400."""

    def filter_status(self, queryset: QuerySet) -> QuerySet:
        value = self.request.query_params.get("status")
        if not value:
            return queryset
        if value not in RequestStatus.values:
            raise ValidationError({
                "status": f"Недопустимый статус. Допустимые значения: {', '.join(RequestStatus.values)}",
            })
        return queryset.filter(status=value)

    def get_queryset(self) -> QuerySet:
        queryset = super().get_queryset()
        if self.action == "list":
            queryset = self.filter_status(queryset)
        return queryset


class PublishedFilterMixin:
    """
    Видимость контента.

    Посетитель всегда получает `filter_public(qs)`. Администратор видит всё
    в карточках, а в списках — только при `?show_all=true`
    (если `staff_list_requires_show_all`).
    """

    staff_list_requires_show_all = True

    def filter_public(self, queryset: QuerySet) -> QuerySet:
        raise NotImplementedError

    def get_queryset(self) -> QuerySet:
        queryset = super().get_queryset()
        if not is_staff(self.request):
            return self.filter_public(queryset)
        if (
            self.action == "list"
            and self.staff_list_requires_show_all
            and not show_all_requested(self.request)
        ):
            return self.filter_public(queryset)
        return queryset


class RequestViewSet(StatusFilterMixin, viewsets.ModelViewSet):
    """Базовый класс заявок: создать может кто угодно, остальное — администратор."""

    permission_classes = [IsCreateAction | permissions.IsAdminUser]
    pagination_class = RequestPagination

    def perform_create(self, serializer) -> None:
        obj = serializer.save(status=RequestStatus.NEW)
        logger.info("%s #%s создана", obj.__class__.__name__, obj.pk)

    def perform_destroy(self, instance) -> None:
        logger.info("%s #%s удалена", instance.__class__.__name__, instance.pk)
        instance.delete()


# -------- Заявки --------

class ContactRequestViewSet(RequestViewSet):
    """
    /api/contact-requests/ — обратная связь.

    После коммита транзакции отправляется письмо на CONTACT_FORM_EMAIL.
    Ошибка отправки не влияет на ответ: заявка уже сохранена.
    """

    queryset = ContactRequest.objects.all()
    serializer_class = ContactRequestSerializer

    def perform_create(self, serializer: ContactRequestSerializer) -> None:
        obj = serializer.save(status=RequestStatus.NEW)
        logger.info("ContactRequest #%s создана (%s)", obj.pk, obj.email)
        transaction.on_commit(lambda: notify_new_contact_request(obj))


class ApplicationRequestViewSet(RequestViewSet):
    """/api/application-requests/ — быстрые заявки (PUT не нужен, статус меняют PATCH-ем)."""

    queryset = ApplicationRequest.objects.all()
    serializer_class = ApplicationRequestSerializer
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]


class TransferRequestViewSet(RequestViewSet):
    queryset = TransferRequest.objects.select_related("vehicle")
    serializer_class = TransferRequestSerializer


# -------- Блог --------

class BlogPostViewSet(PublishedFilterMixin, viewsets.ModelViewSet):
    """
    /api/blog/ — статьи.

    Дополнительно:
      GET /api/blog/featured/     — три последние опубликованные статьи
      GET /api/blog/slug/<slug>/  — статья по slug (только опубликованная)
    """

    queryset = BlogPost.objects.all()
    serializer_class = BlogPostSerializer
    permission_classes = [IsAdminOrReadOnly]

    def filter_public(self, queryset: QuerySet[BlogPost]) -> QuerySet[BlogPost]:
        return queryset.filter(is_published=True)

    @action(detail=False, methods=["get"])
    def featured(self, request: Request) -> Response:
        posts = BlogPost.objects.filter(is_published=True)[:FEATURED_POSTS_LIMIT]
        return Response(self.get_serializer(posts, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[^/.]+)")
    def by_slug(self, request: Request, slug: str) -> Response:
        post = get_object_or_404(BlogPost, slug=slug, is_published=True)
        return Response(self.get_serializer(post).data)

    def perform_create(self, serializer: BlogPostSerializer) -> None:
        post = serializer.save()
        logger.info("BlogPost #%s создана: %s", post.pk, post.slug)

    def perform_destroy(self, instance: BlogPost) -> None:
        logger.info("BlogPost #%s удалена: %s", instance.pk, instance.slug)
        instance.delete()


# -------- Отзывы --------

class ReviewViewSet(PublishedFilterMixin, viewsets.ModelViewSet):
    """
    /api/reviews/ — отзывы.

    Посетитель может оставить отзыв (POST), он появится на сайте
    только после одобрения. Одобрение: PATCH /api/reviews/<id>/approve/.
    """

    queryset = Review.objects.all()
    serializer_class = ReviewSerializer
    permission_classes = [IsCreateAction | IsAdminOrReadOnly]

    def filter_public(self, queryset: QuerySet[Review]) -> QuerySet[Review]:
        return queryset.visible()

    def perform_create(self, serializer: ReviewSerializer) -> None:
        if is_staff(self.request):
            review = serializer.save()
        else:
            review = serializer.save(is_published=False, is_approved=False)
        logger.info("Review #%s создан (rating=%s, approved=%s)", review.pk, review.rating, review.is_approved)

    @action(detail=True, methods=["patch"], permission_classes=[permissions.IsAdminUser])
    def approve(self, request: Request, pk: Any = None) -> Response:
        review: Review = self.get_object()
        serializer = ReviewApproveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        approved = serializer.validated_data["approved"]
        review.is_approved = approved
        review.is_published = approved
        review.save(update_fields=["is_approved", "is_published", "updated_at"])
        logger.info("Review #%s: approved=%s", review.pk, approved)
        return Response(ReviewSerializer(review).data)

    @action(detail=False, methods=["get"])
    def summary(self, request: Request) -> Response:
        visible = Review.objects.visible()
        return Response({
            "average_rating": average_rating(visible),
            "count": visible.count(),
        })


# -------- Преимущества --------

class BenefitViewSet(viewsets.ModelViewSet):
    """
    /api/benefits/ — карточки «Почему мы».

    Порядок 1..n без пропусков: новая карточка встаёт в конец,
    после удаления оставшиеся перенумеровываются.
    """

    queryset = Benefit.objects.all()
    serializer_class = BenefitSerializer
    permission_classes = [IsAdminOrReadOnly]

    def list(self, request: Request, *args, **kwargs) -> Response:
        benefits = self.get_serializer(self.get_queryset(), many=True).data
        stats = BenefitStatsSerializer(BenefitStats.load()).data
        return Response({"benefits": benefits, "stats": stats})

    def perform_create(self, serializer: BenefitSerializer) -> None:
        if serializer.validated_data.get("order") is None:
            last = Benefit.objects.aggregate(last=Max("order"))["last"] or 0
            benefit = serializer.save(order=last + 1)
        else:
            benefit = serializer.save()
        logger.info("Benefit #%s создано (order=%s)", benefit.pk, benefit.order)

    def perform_destroy(self, instance: Benefit) -> None:
        with transaction.atomic():
            instance.delete()
            remaining = Benefit.objects.select_for_update().order_by("order", "id")
            for index, benefit in enumerate(remaining, start=1):
                if benefit.order != index:
                    benefit.order = index
                    benefit.save(update_fields=["order"])
        logger.info("Benefit удалено, порядок пересчитан")


# -------- Автопарк и маршруты --------

class VehicleViewSet(PublishedFilterMixin, viewsets.ModelViewSet):
    queryset = Vehicle.objects.all()
    serializer_class = VehicleSerializer
    permission_classes = [IsAdminOrReadOnly]
    staff_list_requires_show_all = False

    def filter_public(self, queryset: QuerySet[Vehicle]) -> QuerySet[Vehicle]:
        return queryset.filter(is_active=True)


class RouteViewSet(PublishedFilterMixin, viewsets.ModelViewSet):
    queryset = Route.objects.all()
    serializer_class = RouteSerializer
    permission_classes = [IsAdminOrReadOnly]
    staff_list_requires_show_all = False

    def filter_public(self, queryset: QuerySet[Route]) -> QuerySet[Route]:
        return queryset.filter(is_active=True)


# -------- Фотогалереи --------

class PhotoGalleryViewSet(PublishedFilterMixin, viewsets.ModelViewSet):
    """
    /api/galleries/ — фотогалереи.

    Фотографии:
      GET  /api/galleries/<id>/photos/        — список
      POST /api/galleries/<id>/photos/        — добавить одну (order по умолчанию — в конец)
      POST /api/galleries/<id>/photos/batch/  — добавить несколько: {"urls": [...]}
    """

    queryset = PhotoGallery.objects.annotate(photo_count=Count("photos"))
    permission_classes = [IsAdminOrReadOnly]

    def filter_public(self, queryset: QuerySet[PhotoGallery]) -> QuerySet[PhotoGallery]:
        return queryset.filter(is_published=True)

    def get_serializer_class(self):
        if self.action == "retrieve":
            return PhotoGalleryDetailSerializer
        return PhotoGallerySerializer

    @action(detail=True, methods=["get", "post"])
    def photos(self, request: Request, pk: Any = None) -> Response:
        gallery: PhotoGallery = self.get_object()
        if request.method == "GET":
            return Response(GalleryPhotoSerializer(gallery.photos.all(), many=True).data)

        serializer = GalleryPhotoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = serializer.validated_data.get("order")
        photo = serializer.save(
            gallery=gallery,
            order=gallery.next_photo_order() if order is None else order,
        )
        logger.info("GalleryPhoto #%s добавлено в галерею #%s", photo.pk, gallery.pk)
        return Response(GalleryPhotoSerializer(photo).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], url_path="photos/batch")
    def photos_batch(self, request: Request, pk: Any = None) -> Response:
        gallery: PhotoGallery = self.get_object()
        urls = request.data.get("urls") if isinstance(request.data, dict) else None
        if not isinstance(urls, list) or not urls:
            return Response(
                {"error": "Передайте непустой список urls"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        validate_url = URLValidator()
        valid: list[str] = []
        errors: list[dict] = []
        for url in urls:
            try:
                if not isinstance(url, str) or len(url) > 1000:
                    raise DjangoValidationError("Некорректный URL")
                validate_url(url)
            except DjangoValidationError:
                errors.append({"url": url, "error": "Некорректный URL"})
            else:
                valid.append(url)

        if not valid:
            logger.warning("Галерея #%s: пакетная загрузка без корректных URL", gallery.pk)
            return Response(
                {"error": "Ни один URL не прошёл проверку", "details": errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        with transaction.atomic():
            start = gallery.next_photo_order()
            created = [
                GalleryPhoto.objects.create(gallery=gallery, url=url, order=start + offset)
                for offset, url in enumerate(valid)
            ]
        logger.info("Галерея #%s: добавлено %s фото, ошибок %s", gallery.pk, len(created), len(errors))

        payload: dict[str, Any] = {"created": GalleryPhotoSerializer(created, many=True).data}
        if errors:
            payload["errors"] = errors
        return Response(payload, status=status.HTTP_201_CREATED)


class GalleryPhotoViewSet(
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """/api/gallery-photos/<id>/ — отдельная фотография."""

    serializer_class = GalleryPhotoSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self) -> QuerySet[GalleryPhoto]:
        queryset = GalleryPhoto.objects.select_related("gallery")
        if is_staff(self.request):
            return queryset
        return queryset.filter(gallery__is_published=True)


# -------- Настройки (одна строка) --------

class SingletonSettingsView(generics.GenericAPIView):
    """
    Чтение и частичное обновление строки настроек.

    GET — всем (строка создаётся со значениями по умолчанию),
    PUT / PATCH / POST — администратору, обновляются только переданные поля.
    """

    model = None
    permission_classes = [IsAdminOrReadOnly]

    def get_object(self):
        return self.model.load()

    def get_response_data(self, obj) -> dict:
        return self.get_serializer(obj).data

    def get(self, request: Request) -> Response:
        return Response(self.get_response_data(self.get_object()))

    def update_settings(self, request: Request) -> Response:
        if not request.data:
            return Response(
                {"error": "Необходимо указать хотя бы одно поле для обновления"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        obj = self.get_object()
        serializer = self.get_serializer(obj, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        obj = serializer.save()
        logger.info("%s обновлены: %s", self.model.__name__, ", ".join(sorted(serializer.validated_data)))
        return Response(self.get_response_data(obj))

    def put(self, request: Request) -> Response:
        return self.update_settings(request)

    def patch(self, request: Request) -> Response:
        return self.update_settings(request)

    def post(self, request: Request) -> Response:
        return self.update_settings(request)


class SiteSettingsView(SingletonSettingsView):
    """/api/settings/ — контакты, соцсети, логотипы, ключ Google Maps."""

    model = SiteSettings
    serializer_class = SiteSettingsSerializer


class HomeSettingsView(SingletonSettingsView):
    model = HomeSettings
    serializer_class = HomeSettingsSerializer


class BenefitStatsView(SingletonSettingsView):
    model = BenefitStats
    serializer_class = BenefitStatsSerializer


class TransferConfigView(SingletonSettingsView):
    """/api/transfers/ — настройки окна заказа + вычисленный список `vehicles`."""

    model = TransferConfig
    serializer_class = TransferConfigSerializer

    def get_response_data(self, obj: TransferConfig) -> dict:
        data = dict(super().get_response_data(obj))
        data["vehicles"] = build_vehicle_options(obj, Vehicle.objects.filter(is_active=True))
        return data
