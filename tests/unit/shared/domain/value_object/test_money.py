from decimal import Decimal

import pytest

from railway.shared.domain import Currency, Money


class TestMoney:
    def test_inr_money(self):
        money = Money.inr("1500.50")
        assert money.amount == Decimal("1500.50")
        assert money.currency == Currency.inr()
        assert str(money) == "1500.50 INR"

    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.inr(-1)

    def test_zero_amount_is_valid(self):
        assert Money.inr(0).amount == Decimal("0")

    def test_multiply(self):
        assert Money.inr("1800.50").multiply(3) == Money.inr("5401.50")

    def test_multiply_by_negative_raises_error(self):
        with pytest.raises(ValueError):
            Money.inr(100).multiply(-1)

    def test_multiply_by_zero(self):
        assert Money.inr("1500").multiply(0).amount == Decimal("0")

    def test_non_finite_amount_raises_error(self):
        with pytest.raises(ValueError, match="must be finite"):
            Money(amount=Decimal("NaN"), currency=Currency.inr())


class TestCurrency:
    def test_lowercase_is_normalized(self):
        assert Currency("inr").code == "INR"

    def test_invalid_code_raises_error(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            Currency("RUPEE")
