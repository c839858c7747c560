import pytest

from artmarket.models import CartEntry
from artmarket.pricing import OrderSummary, calculate_shipping, calculate_summary
from payloads import cart_entry


def entries(*specs: tuple[int, float, int]) -> list[CartEntry]:
    return [CartEntry.model_validate(cart_entry(i, price, qty)) for i, price, qty in specs]


class TestCalculateShipping:
    def test_empty_cart_ships_free(self) -> None:
        assert calculate_shipping(0) == 0.0

    def test_flat_fee_below_threshold(self) -> None:
        assert calculate_shipping(55.0) == 50.0

    def test_threshold_itself_pays_shipping(self) -> None:
        assert calculate_shipping(500.0) == 50.0

    def test_free_above_threshold(self) -> None:
        assert calculate_shipping(500.01) == 0.0


class TestCalculateSummary:
    def test_two_entry_cart(self) -> None:
        summary = calculate_summary(entries((1, 20.0, 2), (2, 15.0, 1)))

        assert summary == OrderSummary(subtotal=55.0, shipping=50.0, tax=5.5, total=110.5)

    def test_empty_cart(self) -> None:
        summary = calculate_summary([])

        assert summary.subtotal == 0.0
        assert summary.shipping == 0.0
        assert summary.tax == 0.0
        assert summary.total == 0.0

    def test_large_order_ships_free(self) -> None:
        summary = calculate_summary(entries((1, 300.0, 2)))

        assert summary.shipping == 0.0
        assert summary.tax == pytest.approx(60.0)
        assert summary.total == pytest.approx(660.0)

    def test_rounds_to_cents(self) -> None:
        summary = calculate_summary(entries((1, 19.99, 3)))

        assert summary.subtotal == 59.97
        assert summary.tax == 6.0
        assert summary.total == 115.97


class TestFreeShippingRemaining:
    def test_amount_left_below_threshold(self) -> None:
        summary = calculate_summary(entries((1, 20.0, 2), (2, 15.0, 1)))
        assert summary.free_shipping_remaining == 445.0

    def test_zero_for_empty_cart(self) -> None:
        assert calculate_summary([]).free_shipping_remaining == 0.0

    def test_zero_at_threshold(self) -> None:
        assert calculate_summary(entries((1, 500.0, 1))).free_shipping_remaining == 0.0
