from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, MenuItem


CATEGORIES = [
    {"name": "Burgers", "emoji": "🍔", "slug": "burgers", "description": "Delicious flame-grilled burgers", "sort_order": 1},
    {"name": "Shashlik", "emoji": "🍖", "slug": "shashlik", "description": "Traditional grilled kebabs", "sort_order": 2},
    {"name": "Plov", "emoji": "🍚", "slug": "plov", "description": "Authentic pilaf dishes", "sort_order": 3},
    {"name": "Drinks", "emoji": "🥤", "slug": "drinks", "description": "Refreshing beverages", "sort_order": 4},
    {"name": "Combos", "emoji": "🍽️", "slug": "combos", "description": "Complete meal deals", "sort_order": 5},
    {"name": "Sides", "emoji": "🍟", "slug": "sides", "description": "Tasty side dishes", "sort_order": 6},
]

IMAGE_BASE = "https://images.unsplash.com/"

MENU_ITEMS = [
    # Burgers
    {
        "category": "burgers",
        "name": "Durger King Classic",
        "description": "Our signature beef burger with lettuce, tomato, onion, pickles, and special sauce",
        "price": "8.99",
        "image_url": IMAGE_BASE + "photo-1568901346375-23c9450c58cd?w=400",
        "is_popular": True,
        "preparation_time": 8,
        "calories": 650,
        "rating": "4.5",
        "rating_count": 127,
    },
    {
        "category": "burgers",
        "name": "Cheese Royale",
        "description": "Quarter pound beef patty with melted cheese, lettuce, and our royal sauce",
        "price": "9.99",
        "image_url": IMAGE_BASE + "photo-1553979459-d2229ba7433a?w=400",
        "is_popular": True,
        "preparation_time": 10,
        "calories": 720,
        "rating": "4.7",
        "rating_count": 89,
    },
    {
        "category": "burgers",
        "name": "Chicken Supreme",
        "description": "Crispy chicken breast with bacon, cheese, lettuce, and mayo",
        "price": "7.99",
        "image_url": IMAGE_BASE + "photo-1606755962773-d324e2d53401?w=400",
        "preparation_time": 12,
        "calories": 580,
        "rating": "4.3",
        "rating_count": 156,
    },
    # Shashlik
    {
        "category": "shashlik",
        "name": "Beef Shashlik",
        "description": "Tender grilled beef skewers marinated in traditional spices",
        "price": "12.99",
        "image_url": IMAGE_BASE + "photo-1529042410759-befb1204b468?w=400",
        "is_popular": True,
        "preparation_time": 15,
        "calories": 420,
        "rating": "4.8",
        "rating_count": 92,
    },
    {
        "category": "shashlik",
        "name": "Lamb Shashlik",
        "description": "Juicy lamb pieces grilled over open flame with herbs",
        "price": "14.99",
        "image_url": IMAGE_BASE + "photo-1544025162-d76694265947?w=400",
        "preparation_time": 18,
        "calories": 480,
        "rating": "4.9",
        "rating_count": 78,
    },
    {
        "category": "shashlik",
        "name": "Chicken Shashlik",
        "description": "Marinated chicken breast skewers with vegetables",
        "price": "10.99",
        "image_url": IMAGE_BASE + "photo-1555939594-58d7cb561ad1?w=400",
        "preparation_time": 12,
        "calories": 350,
        "rating": "4.6",
        "rating_count": 134,
    },
    # Plov
    {
        "category": "plov",
        "name": "Uzbek Plov",
        "description": "Traditional rice dish with lamb, carrots, and aromatic spices",
        "price": "13.99",
        "image_url": IMAGE_BASE + "photo-1594007654729-407eedc4be65?w=400",
        "is_popular": True,
        "preparation_time": 25,
        "calories": 520,
        "rating": "4.9",
        "rating_count": 156,
    },
    {
        "category": "plov",
        "name": "Chicken Plov",
        "description": "Aromatic rice with tender chicken and traditional vegetables",
        "price": "11.99",
        "image_url": IMAGE_BASE + "photo-1596797038530-2c107229654b?w=400",
        "preparation_time": 20,
        "calories": 460,
        "rating": "4.7",
        "rating_count": 89,
    },
    {
        "category": "plov",
        "name": "Vegetarian Plov",
        "description": "Delicious rice with seasonal vegetables and dried fruits",
        "price": "9.99",
        "image_url": IMAGE_BASE + "photo-1567620905732-2d1ec7ab7445?w=400",
        "preparation_time": 18,
        "calories": 380,
        "rating": "4.4",
        "rating_count": 67,
    },
    # Drinks
    {
        "category": "drinks",
        "name": "Coca-Cola",
        "description": "Classic refreshing cola drink",
        "price": "2.49",
        "image_url": IMAGE_BASE + "photo-1629203851122-3726ecdf080e?w=400",
        "preparation_time": 1,
        "calories": 140,
        "rating": "4.8",
        "rating_count": 203,
    },
    {
        "category": "drinks",
        "name": "Orange Juice",
        "description": "Fresh squeezed orange juice",
        "price": "3.49",
        "image_url": IMAGE_BASE + "photo-1613478223719-2ab802602423?w=400",
        "preparation_time": 2,
        "calories": 110,
        "rating": "4.6",
        "rating_count": 67,
    },
    {
        "category": "drinks",
        "name": "Milkshake Vanilla",
        "description": "Creamy vanilla milkshake topped with whipped cream",
        "price": "4.99",
        "image_url": IMAGE_BASE + "photo-1572490122747-3968b75cc699?w=400",
        "is_popular": True,
        "preparation_time": 3,
        "calories": 320,
        "rating": "4.9",
        "rating_count": 145,
    },
    # Combos
    {
        "category": "combos",
        "name": "Big Durger Combo",
        "description": "Durger King Classic + Medium Fries + Medium Drink",
        "price": "12.99",
        "image_url": IMAGE_BASE + "photo-1571091718767-18b5b1457add?w=400",
        "is_popular": True,
        "preparation_time": 10,
        "calories": 950,
        "rating": "4.8",
        "rating_count": 234,
    },
    {
        "category": "combos",
        "name": "Chicken Deluxe Combo",
        "description": "Chicken Supreme + Large Fries + Large Drink + Cookie",
        "price": "14.99",
        "image_url": IMAGE_BASE + "photo-1594212699903-ec8a3eca50f5?w=400",
        "preparation_time": 15,
        "calories": 1180,
        "rating": "4.6",
        "rating_count": 98,
    },
    # Sides
    {
        "category": "sides",
        "name": "French Fries",
        "description": "Golden crispy french fries with sea salt",
        "price": "3.99",
        "image_url": IMAGE_BASE + "photo-1573080496219-bb080dd4f877?w=400",
        "is_popular": True,
        "preparation_time": 4,
        "calories": 365,
        "rating": "4.4",
        "rating_count": 189,
    },
    {
        "category": "sides",
        "name": "Onion Rings",
        "description": "Crispy golden onion rings with zesty dipping sauce",
        "price": "4.49",
        "image_url": IMAGE_BASE + "photo-1639024471283-03518883512d?w=400",
        "preparation_time": 6,
        "calories": 410,
        "rating": "4.2",
        "rating_count": 76,
    },
]


class Command(BaseCommand):
    help = "Seed the stock Durger King menu (categories and menu items)"

    @transaction.atomic
    def handle(self, *args, **options):
        categories = {}
        created_categories = 0
        for data in CATEGORIES:
            category, was_created = Category.objects.with_archived().update_or_create(
                slug=data["slug"], defaults={**data, "is_active": True}
            )
            categories[category.slug] = category
            created_categories += int(was_created)

        created_items = 0
        updated_items = 0
        for data in MENU_ITEMS:
            defaults = dict(data)
            defaults["category"] = categories[defaults.pop("category")]
            defaults["price"] = Decimal(defaults["price"])
            defaults["rating"] = Decimal(defaults["rating"])
            defaults.setdefault("is_popular", False)

            _, was_created = MenuItem.objects.with_archived().update_or_create(
                name=data["name"], defaults=defaults
            )
            if was_created:
                created_items += 1
            else:
                updated_items += 1

        self.stdout.write(self.style.SUCCESS(
            f"Menu seeded. Categories created: {created_categories}/{len(CATEGORIES)}, "
            f"items created: {created_items}, items updated: {updated_items}"
        ))
