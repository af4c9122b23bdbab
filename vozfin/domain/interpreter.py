"""Pure functions for turning a spoken transcript into a transaction candidate.

This module contains the functional core for voice entry:
- No I/O operations (no microphone, no database, no console)
- No wall-clock access: the reference date is always passed in
- Deterministic for a given (text, today) pair

Every stage reads the lower-cased transcript on its own. The amount is the
only mandatory signal; all other stages fall back to defaults.
"""

import dataclasses
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from vozfin.dates import day_in_current_month, shift_days
from vozfin.domain.models import CATEGORY_LABELS, Category, TransactionType, quantize_amount

INCOME_KEYWORDS = (
    "recebi",
    "receber",
    "entrada",
    "ganho",
    "ganhei",
    "salário",
    "pagamento",
    "depósito",
    "crédito",
    "rendimento",
)

EXPENSE_KEYWORDS = (
    "gastei",
    "gastar",
    "paguei",
    "pagar",
    "comprei",
    "comprar",
    "saída",
    "despesa",
    "débito",
    "gasto",
)

# Ordered: the first keyword found in the transcript decides the category.
CATEGORY_KEYWORDS: tuple[tuple[str, Category], ...] = (
    ("mercado", Category.FOOD),
    ("supermercado", Category.FOOD),
    ("comida", Category.FOOD),
    ("restaurante", Category.FOOD),
    ("lanche", Category.FOOD),
    ("almoço", Category.FOOD),
    ("jantar", Category.FOOD),
    ("café", Category.FOOD),
    ("padaria", Category.FOOD),
    ("uber", Category.TRANSPORT),
    ("taxi", Category.TRANSPORT),
    ("ônibus", Category.TRANSPORT),
    ("metrô", Category.TRANSPORT),
    ("combustível", Category.TRANSPORT),
    ("gasolina", Category.TRANSPORT),
    ("transporte", Category.TRANSPORT),
    ("estacionamento", Category.TRANSPORT),
    ("aluguel", Category.HOUSING),
    ("condomínio", Category.HOUSING),
    ("água", Category.HOUSING),
    ("luz", Category.HOUSING),
    ("energia", Category.HOUSING),
    ("internet", Category.HOUSING),
    ("gás", Category.HOUSING),
    ("boleto", Category.BILLS),
    ("fatura", Category.BILLS),
    ("médico", Category.HEALTH),
    ("farmácia", Category.HEALTH),
    ("remédio", Category.HEALTH),
    ("consulta", Category.HEALTH),
    ("hospital", Category.HEALTH),
    ("dentista", Category.HEALTH),
    ("cinema", Category.ENTERTAINMENT),
    ("show", Category.ENTERTAINMENT),
    ("festa", Category.ENTERTAINMENT),
    ("lazer", Category.ENTERTAINMENT),
    ("streaming", Category.ENTERTAINMENT),
    ("netflix", Category.ENTERTAINMENT),
    ("spotify", Category.ENTERTAINMENT),
    ("curso", Category.EDUCATION),
    ("faculdade", Category.EDUCATION),
    ("escola", Category.EDUCATION),
    ("livro", Category.EDUCATION),
    ("material", Category.EDUCATION),
    ("roupa", Category.SHOPPING),
    ("sapato", Category.SHOPPING),
    ("loja", Category.SHOPPING),
    ("compra", Category.SHOPPING),
    ("salário", Category.SALARY),
    ("pagamento", Category.SALARY),
    ("freelance", Category.FREELANCE),
    ("freela", Category.FREELANCE),
    ("investimento", Category.INVESTMENT),
    ("ação", Category.INVESTMENT),
    ("fundo", Category.INVESTMENT),
    ("renda", Category.INVESTMENT),
    ("pix", Category.PIX),
    ("transferência", Category.PIX),
)

RELATIVE_DATE_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("hoje", 0),
    ("agora", 0),
    ("ontem", -1),
    ("anteontem", -2),
)

MONTH_NAMES = (
    "janeiro",
    "fevereiro",
    "março",
    "marco",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

_NUMBER = r"\d+(?:[.,]\d{1,2})?"
_CURRENCY = r"(?:reais|real|r\$|brl)"

AMOUNT_PATTERNS = (
    re.compile(rf"({_NUMBER})\s*{_CURRENCY}"),
    re.compile(rf"r\$\s*({_NUMBER})"),
    re.compile(rf"({_NUMBER})"),
)

DAY_PATTERNS = (
    re.compile(r"\bdia\s+(\d{1,2})\b"),
    re.compile(rf"\b(\d{{1,2}})\s+de\s+(?:{'|'.join(MONTH_NAMES)})\b"),
)

_ACTION_WORDS = re.compile(r"gastei|recebi|paguei|comprei|adicionar|gasto|entrada")
_AMOUNT_WITH_CURRENCY = re.compile(rf"{_NUMBER}\s*{_CURRENCY}|r\$\s*{_NUMBER}")
_DATE_WORDS = re.compile(r"anteontem|ontem|hoje|agora")

MIN_DESCRIPTION_LENGTH = 3


@dataclass(frozen=True)
class TransactionCandidate:
    """Immutable transaction extracted from a transcript, pending confirmation."""

    type: TransactionType
    amount: Decimal
    category: Category
    description: str
    date: date
    confidence: int


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def extract_amount(text: str) -> Decimal | None:
    """Extract the monetary amount from a transcript.

    Args:
        text: Lower-cased transcript.

    Returns:
        Positive amount with two fractional digits, or None if not found.
    """
    for pattern in AMOUNT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        try:
            value = quantize_amount(Decimal(match.group(1).replace(",", ".")))
        except InvalidOperation:
            return None
        return value if value > 0 else None

    return None


def classify_type(text: str) -> tuple[TransactionType, bool]:
    """Classify the direction of money flow.

    Ambiguous transcripts (both or neither keyword sets present) are
    treated as expenses.

    Args:
        text: Lower-cased transcript.

    Returns:
        Tuple of (type, signaled) where signaled is True if a keyword
        for the returned type was found.
    """
    has_income = _contains_any(text, INCOME_KEYWORDS)
    has_expense = _contains_any(text, EXPENSE_KEYWORDS)

    if has_income and not has_expense:
        return TransactionType.INCOME, True
    return TransactionType.EXPENSE, has_expense


def classify_category(text: str, txn_type: TransactionType) -> tuple[Category, bool]:
    """Classify the category using the ordered keyword table.

    Args:
        text: Lower-cased transcript.
        txn_type: Already classified transaction type.

    Returns:
        Tuple of (category, signaled) where signaled is False for the
        type-based fallback.
    """
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in text:
            return category, True

    if txn_type is TransactionType.INCOME:
        return Category.SALARY, False
    return Category.OTHER, False


def resolve_date(text: str, today: date) -> date:
    """Resolve the transaction date from relative or day-of-month mentions.

    Args:
        text: Lower-cased transcript.
        today: Capture date.

    Returns:
        Resolved date, defaulting to today.
    """
    for keyword, offset in RELATIVE_DATE_KEYWORDS:
        if re.search(rf"\b{keyword}\b", text):
            return shift_days(today, offset)

    for pattern in DAY_PATTERNS:
        match = pattern.search(text)
        if match:
            return day_in_current_month(today, int(match.group(1)))

    return today


def generate_description(text: str, category: Category) -> str:
    """Build a readable description from what is left of the transcript.

    Args:
        text: Lower-cased transcript.
        category: Resolved category, used as fallback label.

    Returns:
        Capitalized remainder, or the category label if too short.
    """
    description = _ACTION_WORDS.sub("", text)
    description = _AMOUNT_WITH_CURRENCY.sub("", description)
    description = _DATE_WORDS.sub("", description).strip()

    if len(description) < MIN_DESCRIPTION_LENGTH:
        return CATEGORY_LABELS[category]

    return description[0].upper() + description[1:]


def score_confidence(type_signaled: bool, has_category: bool) -> int:
    """Score how much of the candidate came from explicit signals.

    Any category other than OTHER counts, including the salary fallback
    for income.

    The amount is always present here, so the result is 40, 70 or 100.
    """
    confidence = 40
    if type_signaled:
        confidence += 30
    if has_category:
        confidence += 30
    return min(max(confidence, 0), 100)


def interpret_transcript(text: str, today: date) -> TransactionCandidate | None:
    """Interpret a transcript as a transaction candidate.

    Args:
        text: Raw transcript text.
        today: Capture date used for relative date keywords.

    Returns:
        TransactionCandidate, or None when no amount could be extracted.
    """
    if not text or not text.strip():
        return None

    lowered = text.lower()

    amount = extract_amount(lowered)
    if amount is None:
        return None

    txn_type, type_signaled = classify_type(lowered)
    category, _ = classify_category(lowered, txn_type)

    return TransactionCandidate(
        type=txn_type,
        amount=amount,
        category=category,
        description=generate_description(lowered, category),
        date=resolve_date(lowered, today),
        confidence=score_confidence(type_signaled, category is not Category.OTHER),
    )


def apply_edits(
    candidate: TransactionCandidate,
    *,
    txn_type: TransactionType | str | None = None,
    amount: Decimal | str | None = None,
    category: Category | str | None = None,
    description: str | None = None,
    txn_date: date | None = None,
) -> TransactionCandidate:
    """Apply operator edits to a candidate before it is stored.

    Args:
        candidate: Candidate to edit.
        txn_type: New type ("income"/"expense").
        amount: New amount; accepts "12,50" style strings.
        category: New category value.
        description: New description; blank keeps the current one.
        txn_date: New date.

    Returns:
        New candidate with the edits applied.

    Raises:
        ValueError: If an edited value is invalid.
    """
    changes: dict[str, object] = {}

    if txn_type is not None:
        try:
            changes["type"] = TransactionType(txn_type)
        except ValueError:
            raise ValueError(f"Unknown transaction type: {txn_type}") from None

    if amount is not None:
        try:
            value = Decimal(str(amount).strip().replace(",", "."))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {amount}") from None
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount}")
        value = quantize_amount(value)
        if value <= 0:
            raise ValueError("Amount must be positive")
        changes["amount"] = value

    if category is not None:
        try:
            changes["category"] = Category(category)
        except ValueError:
            raise ValueError(f"Unknown category: {category}") from None

    if description is not None and description.strip():
        changes["description"] = description.strip()

    if txn_date is not None:
        changes["date"] = txn_date

    return dataclasses.replace(candidate, **changes)
