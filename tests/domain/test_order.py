"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import (
    Forbidden,
    InvalidLineCount,
    InvalidTransition,
    ValidationError,
)
from storefront.domain.model.order import (
    MAX_ORDER_LINES,
    Order,
    OrderLine,
    OrderStatus,
)
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderFilter


def _make_line(product_id: str = "P1", qty: int = 1, price: str = "10.00") -> OrderLine:
    """Helper to build a valid order line."""
    return OrderLine(
        product_id=product_id,
        product_name=f"Product {product_id}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _make_order(owner: str = "U1", lines: list[OrderLine] | None = None) -> Order:
    order = Order.create(owner_id=owner, code="SO-1", lines=lines or [_make_line()])
    order.id = 1
    return order


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(
            owner_id="U1",
            code="SO-1",
            lines=[_make_line("P1", qty=2, price="10.00"), _make_line("P2", price="5.50")],
        )
        assert order.owner_id == "U1"
        assert order.code == "SO-1"
        assert order.status == OrderStatus.CREATED
        assert len(order.lines) == 2
        assert order.total == Money.of("25.50")

    def test_id_is_none_for_new_orders(self):
        order = Order.create("U1", "SO-1", [_make_line()])
        assert order.id is None  # assigned by repository

    def test_created_at_is_utc(self):
        order = Order.create("U1", "SO-1", [_make_line()])
        assert order.created_at.tzinfo is not None

    def test_lines_keep_insertion_order(self):
        lines = [_make_line("P3"), _make_line("P1"), _make_line("P2")]
        order = Order.create("U1", "SO-1", lines)
        assert [line.product_id for line in order.lines] == ["P3", "P1", "P2"]

    def test_blank_owner_rejected(self):
        with pytest.raises(ValidationError, match="owner is required"):
            Order.create("  ", "SO-1", [_make_line()])

    def test_missing_code_rejected(self):
        with pytest.raises(ValidationError, match="code is required"):
            Order.create("U1", "", [_make_line()])


class TestOrderLineCount:

    def test_no_lines_rejected(self):
        with pytest.raises(InvalidLineCount):
            Order.create("U1", "SO-1", [])

    def test_six_lines_rejected(self):
        with pytest.raises(InvalidLineCount, match="between 1 and 5"):
            Order.create("U1", "SO-1", [_make_line() for _ in range(6)])

    def test_five_lines_accepted(self):
        order = Order.create("U1", "SO-1", [_make_line() for _ in range(MAX_ORDER_LINES)])
        assert len(order.lines) == 5


class TestOrderTotals:

    def test_line_subtotal(self):
        assert _make_line(qty=3, price="15.00").subtotal == Money.of("45.00")

    def test_total_is_sum_of_subtotals(self):
        lines = [
            _make_line("P1", qty=3, price="0.10"),
            _make_line("P2", qty=7, price="0.20"),
            _make_line("P3", qty=1, price="19.99"),
        ]
        order = Order.create("U1", "SO-1", lines)
        assert order.total == Money.of("21.69")

    def test_zero_priced_lines_allowed(self):
        order = Order.create("U1", "SO-1", [_make_line(price="0.00")])
        assert order.total == Money.zero()


class TestOrderCancel:

    def test_owner_can_cancel(self):
        order = _make_order()
        order.cancel("U1")
        assert order.status == OrderStatus.CANCELLED

    def test_other_user_forbidden(self):
        order = _make_order()
        with pytest.raises(Forbidden):
            order.cancel("U2")
        assert order.status == OrderStatus.CREATED

    def test_cancel_twice_rejected(self):
        order = _make_order()
        order.cancel("U1")
        with pytest.raises(InvalidTransition, match="cancelled"):
            order.cancel("U1")

    def test_ownership_checked_before_status(self):
        order = _make_order()
        order.cancel("U1")
        with pytest.raises(Forbidden):
            order.cancel("U2")


class TestOrderFilter:

    def test_empty_filter_matches_everything(self):
        assert OrderFilter().matches(_make_order())

    def test_code_filter(self):
        order = _make_order()
        assert OrderFilter(code="SO-1").matches(order)
        assert not OrderFilter(code="SO-2").matches(order)

    def test_status_filter(self):
        order = _make_order()
        assert OrderFilter(status=OrderStatus.CREATED).matches(order)
        assert not OrderFilter(status=OrderStatus.CANCELLED).matches(order)
