import logging
from datetime import timedelta

from django.db.models import Avg, Count, Q, Sum
from django.utils import timezone

from orders.calculators import ZERO, quantize
from orders.models import Order

logger = logging.getLogger(__name__)


class DashboardStatsService:
    """Aggregates for the admin dashboard. Cancelled orders earn no revenue."""

    ACTIVITY_WINDOW_DAYS = 30

    @staticmethod
    def get_stats(now=None):
        now = now or timezone.now()
        start_of_today = timezone.localtime(now).replace(hour=0, minute=0, second=0, microsecond=0)
        window_start = now - timedelta(days=DashboardStatsService.ACTIVITY_WINDOW_DAYS)

        today = Order.objects.filter(created_at__gte=start_of_today, created_at__lte=now)
        today_stats = today.aggregate(
            order_count=Count("id"),
            revenue=Sum("total", filter=~Q(status=Order.OrderStatus.CANCELLED)),
        )

        recent = Order.objects.filter(created_at__gte=window_start, created_at__lte=now)
        active_users = (
            recent.filter(user__isnull=False).values("user_id").distinct().count()
            + recent.filter(user__isnull=True).values("channel_user_id").distinct().count()
        )
        average = recent.exclude(status=Order.OrderStatus.CANCELLED).aggregate(
            average=Avg("total")
        )["average"]

        return {
            "today_orders": today_stats["order_count"] or 0,
            "today_revenue": quantize(today_stats["revenue"] or ZERO),
            "active_users": active_users,
            "average_order": quantize(average or ZERO),
        }
