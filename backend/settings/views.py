from rest_framework import status
from rest_framework.response import Response

from core_backend.base import ReadOnlyBaseViewSet
from users.permissions import IsAdministrator
from .models import StoreSetting
from .serializers import StoreSettingSerializer
from .services import SettingsService


class StoreSettingViewSet(ReadOnlyBaseViewSet):
    """
    Store settings, administrators only. POST creates or updates by key.
    """

    queryset = StoreSetting.objects.all()
    serializer_class = StoreSettingSerializer
    permission_classes = [IsAdministrator]
    lookup_field = "key"
    search_fields = ["key", "description"]
    ordering = ["key"]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        setting, created = SettingsService.upsert_setting(
            key=data["key"],
            value=data.get("value", ""),
            type=data.get("type"),
            description=data.get("description"),
        )
        return Response(
            self.get_serializer(setting).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )
