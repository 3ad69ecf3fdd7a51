from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.serializers import DashboardStatsSerializer
from orders.services import DashboardStatsService
from users.permissions import IsAdministrator


class DashboardStatsView(APIView):
    """Headline numbers for the admin dashboard."""

    permission_classes = [IsAdministrator]

    def get(self, request: Request) -> Response:
        stats = DashboardStatsService.get_stats()
        return Response(DashboardStatsSerializer(stats).data)
