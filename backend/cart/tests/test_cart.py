"""
Cart tests.

The cart is exercised with in-memory storage and hand-built menu item
snapshots, so no database is needed.
"""
import pytest
from decimal import Decimal

from cart.cart import Cart, CartMenuItem
from cart.storage import InMemoryCartStorage, SessionCartStorage


BURGER = CartMenuItem(id=1, name='Classic Burger', price=Decimal('8.99'))
FRIES = CartMenuItem(id=2, name='French Fries', price=Decimal('3.99'))
BOX = CartMenuItem(id=3, name='Family Box', price=Decimal('12.50'))


class FakeSession(dict):
    modified = False


class FrozenClock:
    """Returns the same millisecond every time, like a fast client"""

    def __call__(self):
        return 1_700_000_000_000


@pytest.fixture
def cart(fee_policy):
    return Cart(InMemoryCartStorage(), fee_policy=fee_policy, clock=FrozenClock())


class TestCartLines:
    """Adding, updating and removing lines"""

    def test_add_new_item_appends_line(self, cart):
        line = cart.add_item(BURGER, quantity=2)

        assert len(cart.lines) == 1
        assert line.quantity == 2
        assert line.menu_item.price == Decimal('8.99')

    def test_adding_same_item_merges_quantity(self, cart):
        cart.add_item(BURGER, quantity=1)
        cart.add_item(BURGER, quantity=2)

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 3

    def test_merge_keeps_previous_note_without_new_one(self, cart):
        cart.add_item(BURGER, special_instructions='No pickles')
        cart.add_item(BURGER)

        assert cart.lines[0].special_instructions == 'No pickles'

    def test_merge_replaces_note_when_given(self, cart):
        cart.add_item(BURGER, special_instructions='No pickles')
        cart.add_item(BURGER, special_instructions='Extra cheese')

        assert cart.lines[0].special_instructions == 'Extra cheese'

    def test_lines_get_distinct_ids_within_one_millisecond(self, cart):
        first = cart.add_item(BURGER)
        second = cart.add_item(FRIES)

        assert first.id != second.id

    def test_update_quantity_sets_exact_value(self, cart):
        line = cart.add_item(BURGER, quantity=5)

        cart.update_quantity(line.id, 2)

        assert cart.lines[0].quantity == 2

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_update_quantity_to_zero_or_less_removes_line(self, cart, quantity):
        line = cart.add_item(BURGER)
        cart.add_item(FRIES)

        cart.update_quantity(line.id, quantity)

        assert [l.menu_item.id for l in cart.lines] == [FRIES.id]

    def test_update_unknown_line_is_ignored(self, cart):
        cart.add_item(BURGER)

        assert cart.update_quantity(123, 4) is None
        assert cart.lines[0].quantity == 1

    def test_remove_item(self, cart):
        line = cart.add_item(BURGER)

        assert cart.remove_item(line.id) is True
        assert cart.remove_item(line.id) is False
        assert cart.is_empty()

    def test_clear(self, cart):
        cart.add_item(BURGER)
        cart.add_item(FRIES)

        cart.clear()

        assert cart.lines == []
        assert cart.total_items() == 0

    def test_add_rejects_non_positive_quantity(self, cart):
        with pytest.raises(ValueError):
            cart.add_item(BURGER, quantity=0)


class TestCartTotals:
    """Totals come from the prices captured when items were added"""

    def test_reference_cart(self, cart):
        cart.add_item(BURGER, quantity=2)
        cart.add_item(FRIES, quantity=1)

        assert cart.subtotal() == Decimal('21.97')
        assert cart.delivery_fee() == Decimal('2.99')
        assert cart.total() == Decimal('24.96')
        assert cart.total_items() == 3

    def test_free_delivery_at_threshold(self, cart):
        cart.add_item(BOX, quantity=2)

        assert cart.subtotal() == Decimal('25.00')
        assert cart.delivery_fee() == Decimal('0.00')
        assert cart.total() == Decimal('25.00')

    def test_empty_cart_still_quotes_fee(self, cart):
        assert cart.subtotal() == Decimal('0.00')
        assert cart.delivery_fee() == Decimal('2.99')

    def test_as_order_items(self, cart):
        cart.add_item(BURGER, quantity=2, special_instructions='Well done')
        cart.add_item(FRIES)

        assert cart.as_order_items() == [
            {'menu_item_id': 1, 'quantity': 2, 'special_instructions': 'Well done'},
            {'menu_item_id': 2, 'quantity': 1, 'special_instructions': ''},
        ]


class TestCartPersistence:
    """A cart rebuilt from the same storage sees the same lines"""

    def test_reload_from_storage(self, fee_policy):
        storage = InMemoryCartStorage()
        cart = Cart(storage, fee_policy=fee_policy)
        cart.add_item(BURGER, quantity=2, special_instructions='No onions')

        reloaded = Cart(storage, fee_policy=fee_policy)

        assert len(reloaded.lines) == 1
        assert reloaded.lines[0].menu_item == BURGER
        assert reloaded.lines[0].special_instructions == 'No onions'
        assert reloaded.subtotal() == Decimal('17.98')

    def test_session_storage_round_trip(self, fee_policy):
        session = FakeSession()
        cart = Cart(SessionCartStorage(session, key='cart'), fee_policy=fee_policy)
        cart.add_item(FRIES, quantity=3)

        assert session['cart'][0]['menu_item']['price'] == '3.99'
        assert Cart(SessionCartStorage(session, key='cart'), fee_policy=fee_policy).total_items() == 3

    def test_unreadable_lines_are_dropped(self, fee_policy):
        storage = InMemoryCartStorage([
            {'id': 1, 'menu_item': {'id': 1, 'name': 'Burger', 'price': 'abc'}, 'quantity': 1},
            {'id': 2, 'menu_item': {'id': 2, 'name': 'Fries', 'price': '3.99'}, 'quantity': 2},
        ])

        cart = Cart(storage, fee_policy=fee_policy)

        assert [line.id for line in cart.lines] == [2]
