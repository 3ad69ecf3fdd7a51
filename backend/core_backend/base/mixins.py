from rest_framework.viewsets import ViewSetMixin
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework import status

from core_backend.exceptions import NotFoundError, ValidationError


class OptimizedQuerysetMixin(ViewSetMixin):
    """
    A ViewSet mixin that optimizes the queryset using the
    `select_related_fields` and `prefetch_related_fields` attributes declared
    in the current serializer's Meta class.
    """

    def get_queryset(self):
        queryset = super().get_queryset()

        try:
            serializer_class = self.get_serializer_class()
        except (AttributeError, AssertionError):
            return queryset

        meta = getattr(serializer_class, "Meta", None)
        if meta is None:
            return queryset

        select_related = getattr(meta, "select_related_fields", None)
        if select_related:
            queryset = queryset.select_related(*select_related)

        prefetch_related = getattr(meta, "prefetch_related_fields", None)
        if prefetch_related:
            queryset = queryset.prefetch_related(*prefetch_related)

        return queryset


class ArchivingViewSetMixin(ViewSetMixin):
    """
    A ViewSet mixin for models using SoftDeleteMixin.

    - DELETE archives the record instead of removing it
    - ?include_archived=true includes archived records, ?include_archived=only
      shows nothing else
    - POST <pk>/unarchive/ restores an archived record
    """

    def get_queryset(self):
        queryset = super().get_queryset()

        if not hasattr(queryset.model, "is_active"):
            return queryset

        if not self.can_view_archived():
            return queryset

        include_archived = self.request.query_params.get("include_archived", "").lower()
        manager = queryset.model._default_manager

        if include_archived in ["true", "1", "yes"]:
            if hasattr(manager, "with_archived"):
                queryset = manager.with_archived()
        elif include_archived == "only":
            if hasattr(manager, "archived_only"):
                queryset = manager.archived_only()
            else:
                queryset = queryset.filter(is_active=False)

        return queryset

    def can_view_archived(self):
        return bool(getattr(self.request.user, "is_admin", False))

    def perform_destroy(self, instance):
        if hasattr(instance, "archive"):
            instance.archive(
                archived_by=self.request.user if self.request.user.is_authenticated else None
            )
        else:
            instance.delete()

    @action(detail=True, methods=["post"])
    def unarchive(self, request, pk=None):
        """
        Unarchive a single record.
        """
        model = self.get_queryset().model
        manager = model._default_manager
        queryset = manager.with_archived() if hasattr(manager, "with_archived") else manager.all()

        try:
            obj = queryset.get(pk=pk)
        except (model.DoesNotExist, ValueError):
            raise NotFoundError(f"{model._meta.verbose_name.capitalize()} not found.")

        if obj.is_active:
            raise ValidationError("Record is not archived.")

        obj.unarchive()

        serializer = self.get_serializer(obj)
        return Response(serializer.data, status=status.HTTP_200_OK)
