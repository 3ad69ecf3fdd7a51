from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer for model resources.

    Subclasses may declare `select_related_fields` / `prefetch_related_fields`
    on their Meta; OptimizedQuerysetMixin applies them to the viewset queryset.
    """

    class Meta:
        select_related_fields = []
        prefetch_related_fields = []


class TimestampedSerializer(BaseModelSerializer):
    """
    Serializer for models carrying created_at / updated_at audit columns.
    Both are always read-only.
    """

    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)

    class Meta(BaseModelSerializer.Meta):
        abstract = True
