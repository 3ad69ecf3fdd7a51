"""
Core backend base components.

Foundational viewset, serializer and mixin classes shared by every app.
"""

from .viewsets import BaseViewSet, ReadOnlyBaseViewSet
from .serializers import BaseModelSerializer, TimestampedSerializer
from .mixins import OptimizedQuerysetMixin, ArchivingViewSetMixin

__all__ = [
    # ViewSets
    'BaseViewSet',
    'ReadOnlyBaseViewSet',

    # Serializers
    'BaseModelSerializer',
    'TimestampedSerializer',

    # Mixins
    'OptimizedQuerysetMixin',
    'ArchivingViewSetMixin',
]
