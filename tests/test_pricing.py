"""Tests for reservation pricing."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from reservations.pricing import EXTRA_PRICES, FLAT_INSURANCE, calculate_quote, rental_days

PICKUP = datetime(2025, 6, 1, 10, 0)


class TestRentalDays:
    def test_whole_days(self):
        assert rental_days(PICKUP, PICKUP + timedelta(days=3)) == 3

    def test_times_of_day_are_ignored(self):
        assert rental_days(PICKUP, datetime(2025, 6, 3, 18, 0)) == 2
        assert rental_days(PICKUP, datetime(2025, 6, 3, 8, 0)) == 2
        assert rental_days(PICKUP, datetime(2025, 6, 1, 18, 0)) == 0

    def test_next_morning_is_one_day(self):
        assert rental_days(datetime(2025, 6, 1, 23, 0), datetime(2025, 6, 2, 1, 0)) == 1

    def test_non_positive_ranges(self):
        assert rental_days(PICKUP, PICKUP) == 0
        assert rental_days(PICKUP, PICKUP - timedelta(days=1)) == -1

    def test_mixed_timezone_awareness_is_compared_in_utc(self):
        aware_return = (PICKUP + timedelta(days=1)).replace(tzinfo=timezone.utc)
        assert rental_days(PICKUP, aware_return) == 1


class TestCalculateQuote:
    def test_two_days_without_extras(self):
        quote = calculate_quote(Decimal("89.00"), PICKUP, PICKUP + timedelta(days=2))

        assert quote.days == 2
        assert quote.car_cost == Decimal("178.00")
        assert quote.extras_cost == Decimal("0.00")
        assert quote.flat_insurance == Decimal("30.00")
        assert quote.subtotal == Decimal("208.00")
        assert quote.total == Decimal("255.84")

    def test_form_default_times_do_not_add_a_day(self):
        quote = calculate_quote(Decimal("89.00"), PICKUP, datetime(2025, 6, 3, 18, 0))

        assert quote.days == 2
        assert quote.total == Decimal("255.84")

    def test_four_days_with_gps_and_insurance(self):
        quote = calculate_quote(Decimal("119.00"), PICKUP, PICKUP + timedelta(days=4), ["gps", "insurance"])

        assert quote.car_cost == Decimal("476.00")
        assert quote.extras_cost == Decimal("240.00")
        assert quote.subtotal == Decimal("746.00")
        assert quote.vat == Decimal("171.58")
        assert quote.total == Decimal("917.58")
        assert quote.extras == ["gps", "insurance"]

    def test_every_extra_is_charged_per_day(self):
        quote = calculate_quote(Decimal("100"), PICKUP, PICKUP + timedelta(days=3), list(EXTRA_PRICES))

        assert quote.extras_cost == Decimal("315.00")
        assert quote.subtotal == Decimal("300") + Decimal("315") + FLAT_INSURANCE

    def test_flat_insurance_does_not_scale_with_duration(self):
        one_day = calculate_quote(Decimal("50"), PICKUP, PICKUP + timedelta(days=1))
        ten_days = calculate_quote(Decimal("50"), PICKUP, PICKUP + timedelta(days=10))

        assert one_day.subtotal - one_day.car_cost == Decimal("30.00")
        assert ten_days.subtotal - ten_days.car_cost == Decimal("30.00")

    def test_rounding_happens_only_on_the_result(self):
        quote = calculate_quote(Decimal("33.33"), PICKUP, PICKUP + timedelta(days=1))

        # (33.33 + 30) * 1.23 = 77.8959
        assert quote.total == Decimal("77.90")

    @pytest.mark.parametrize("delta", [timedelta(0), timedelta(days=-2)])
    def test_degenerate_range_is_free(self, delta):
        quote = calculate_quote(Decimal("89.00"), PICKUP, PICKUP + delta, ["gps"])

        assert quote.total == Decimal("0.00")
        assert quote.subtotal == Decimal("0.00")
        assert not quote.is_chargeable

    def test_unknown_extra_is_rejected(self):
        with pytest.raises(KeyError):
            calculate_quote(Decimal("89.00"), PICKUP, PICKUP + timedelta(days=1), ["jetpack"])
