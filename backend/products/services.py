import logging

from .models import MenuItem

logger = logging.getLogger(__name__)


class MenuCatalogService:
    """
    Read-only price lookup used by the cart and by order creation.

    Only orderable items are returned: the item is active and its category,
    if any, has not been archived.
    """

    @staticmethod
    def available_items():
        return (
            MenuItem.objects.exclude(category__is_active=False)
            .select_related("category")
        )

    def resolve_items(self, item_ids):
        """
        Returns ``{id: MenuItem}`` for the orderable items among ``item_ids``.
        Unknown and inactive ids are simply absent from the result.
        """
        ids = {int(item_id) for item_id in item_ids}
        if not ids:
            return {}
        items = self.available_items().filter(pk__in=ids)
        resolved = {item.pk: item for item in items}
        if len(resolved) != len(ids):
            logger.debug(
                f"Catalog lookup: {len(ids) - len(resolved)} of {len(ids)} menu items unavailable"
            )
        return resolved

    def get_item(self, item_id):
        return self.resolve_items([item_id]).get(int(item_id))
