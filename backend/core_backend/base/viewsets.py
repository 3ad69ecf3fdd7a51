from rest_framework import viewsets, filters
from django_filters.rest_framework import DjangoFilterBackend
from .mixins import OptimizedQuerysetMixin, ArchivingViewSetMixin


class BaseViewSet(OptimizedQuerysetMixin, ArchivingViewSetMixin, viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Automatic query optimization via OptimizedQuerysetMixin
    - Archiving support via ArchivingViewSetMixin
    - Standard filtering, search and ordering

    Usage:
        class MenuItemViewSet(BaseViewSet):
            queryset = MenuItem.objects.all()
            serializer_class = MenuItemSerializer
    """

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    ordering = ['-id']

    def get_queryset(self):
        """
        Re-evaluate the class-level queryset at request time so archive
        state changes made by earlier requests are visible.
        """
        if getattr(self, 'queryset', None) is not None:
            original_queryset = self.queryset
            self.queryset = original_queryset.model.objects.all()
            # MRO: OptimizedQuerysetMixin -> ArchivingViewSetMixin -> ModelViewSet
            result = super().get_queryset()
            self.queryset = original_queryset
            return result
        return super().get_queryset()


class ReadOnlyBaseViewSet(OptimizedQuerysetMixin, viewsets.ReadOnlyModelViewSet):
    """
    Base ViewSet for read-only endpoints. No archiving, since nothing is written.
    """

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]
    ordering = ['-id']
