"""Tests for vozfin.domain.models helpers."""

from decimal import Decimal

from vozfin.domain.models import CATEGORY_LABELS, Category, Money, format_money_display, from_money, to_money


class TestMoneyConversion:
    """Tests for to_money and from_money."""

    def test_to_centavos(self) -> None:
        """Should convert reais to centavos."""
        assert to_money(Decimal("50.90")) == Money(5090)

    def test_rounds_to_two_digits(self) -> None:
        """Should round half up to the centavo."""
        assert to_money(Decimal("1.005")) == Money(101)

    def test_back_to_reais(self) -> None:
        """Should convert centavos back to reais."""
        assert from_money(Money(150000)) == Decimal("1500.00")


class TestFormatMoneyDisplay:
    """Tests for format_money_display."""

    def test_pt_br_separators(self) -> None:
        """Should use dot for thousands and comma for decimals."""
        assert format_money_display(Money(150000)) == "R$ 1.500,00"

    def test_signs(self) -> None:
        """Should prefix sign when requested."""
        assert format_money_display(Money(-1250), include_sign=True) == "-R$ 12,50"
        assert format_money_display(Money(1250), include_sign=True) == "+R$ 12,50"


def test_every_category_has_a_label() -> None:
    """Should have a display label for every category."""
    assert set(CATEGORY_LABELS) == set(Category)
