"""Domain type definitions for vozfin.

- Money: Amount in centavos (minor units)
- TransactionType: Direction of money flow
- Category: Closed set of transaction categories
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import NewType

# Money amounts are stored as centavos (minor units) to avoid floating point errors
Money = NewType("Money", int)

CENTS = Decimal("0.01")


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Category(str, Enum):
    SALARY = "salary"
    FREELANCE = "freelance"
    INVESTMENT = "investment"
    FOOD = "food"
    TRANSPORT = "transport"
    HOUSING = "housing"
    HEALTH = "health"
    ENTERTAINMENT = "entertainment"
    EDUCATION = "education"
    SHOPPING = "shopping"
    BILLS = "bills"
    PIX = "pix"
    OTHER = "other"


CATEGORY_LABELS: dict[Category, str] = {
    Category.FOOD: "Alimentação",
    Category.TRANSPORT: "Transporte",
    Category.HOUSING: "Moradia",
    Category.HEALTH: "Saúde",
    Category.ENTERTAINMENT: "Entretenimento",
    Category.EDUCATION: "Educação",
    Category.SHOPPING: "Compras",
    Category.SALARY: "Salário",
    Category.FREELANCE: "Freelance",
    Category.INVESTMENT: "Investimento",
    Category.BILLS: "Contas",
    Category.PIX: "Transferência PIX",
    Category.OTHER: "Outros",
}

TYPE_LABELS: dict[TransactionType, str] = {
    TransactionType.INCOME: "Receita",
    TransactionType.EXPENSE: "Despesa",
}


def quantize_amount(value: Decimal) -> Decimal:
    """Round a currency amount to two fractional digits."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_money(value: Decimal) -> Money:
    """Convert a reais amount to centavos.

    Args:
        value: Amount in reais.

    Returns:
        Amount in centavos.
    """
    return Money(int(quantize_amount(value) * 100))


def from_money(amount: Money) -> Decimal:
    """Convert centavos back to a reais amount."""
    return quantize_amount(Decimal(amount) / 100)


def format_money_display(amount: Money, include_sign: bool = False) -> str:
    """Format money amount for display in pt-BR style.

    Args:
        amount: Amount in centavos.
        include_sign: Whether to include + or - sign.

    Returns:
        Formatted string (e.g., "R$ 1.500,00" or "-R$ 12,50").
    """
    reais = abs(amount) / 100
    # Swap separators: 1,500.00 -> 1.500,00
    digits = f"{reais:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    formatted = f"R$ {digits}"

    if not include_sign:
        return formatted
    if amount < 0:
        return f"-{formatted}"
    return f"+{formatted}"
