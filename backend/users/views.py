from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core_backend.base import BaseViewSet, ReadOnlyBaseViewSet
from .models import User, Staff
from .permissions import IsAdministrator
from .serializers import UserSerializer, StaffSerializer, TelegramIdentitySerializer
from .services import UserService


class CurrentUserView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class UserViewSet(ReadOnlyBaseViewSet):
    """
    Identity records, visible to administrators only.
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsAdministrator]
    search_fields = ["email", "first_name", "last_name", "telegram_username"]
    filterset_fields = ["is_admin", "is_active"]
    ordering = ["-created_at"]


class StaffViewSet(BaseViewSet):
    """
    Staff directory. Deleting a staff member archives them.
    """

    queryset = Staff.objects.all()
    serializer_class = StaffSerializer
    permission_classes = [IsAdministrator]
    search_fields = ["name", "email", "phone"]
    filterset_fields = ["role"]
    ordering_fields = ["name", "hire_date", "role"]
    ordering = ["name"]


class TelegramIdentityView(APIView):
    """
    Records the Telegram profile of a bot or Mini App user. Repeated calls
    refresh the stored profile.
    """

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = TelegramIdentitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        existed = UserService.get_by_telegram_id(data["telegram_user_id"]) is not None
        user = UserService.upsert_telegram_user(
            telegram_user_id=data["telegram_user_id"],
            username=data["username"],
            first_name=data["first_name"],
            last_name=data["last_name"],
        )
        return Response(
            UserSerializer(user).data,
            status=status.HTTP_200_OK if existed else status.HTTP_201_CREATED,
        )
