"""
Currency formatting utilities.

Amounts are shown with Indian digit grouping (12,34,567.50) and spelled
out with the lakh/crore scale on salary slips.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from num2words import num2words

Number = Union[Decimal, int, float, str]

_PAISE = Decimal("0.01")


def to_decimal(amount: Number) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() keeps floats like 0.1 from expanding to binary noise
    return Decimal(str(amount))


class CurrencyFormatter:
    """Currency formatting utilities"""

    @staticmethod
    def group_indian(digits: str) -> str:
        """Group an unsigned integer string as 12,34,567"""
        if len(digits) <= 3:
            return digits
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        return ",".join(groups + [tail])

    @classmethod
    def format_indian_currency(
        cls,
        amount: Number,
        symbol: str = "₹",
        always_show_paise: bool = False,
    ) -> str:
        """
        Format amount in Indian currency format.

        Paise are dropped for whole amounts unless ``always_show_paise``.
        """
        value = to_decimal(amount).quantize(_PAISE, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        rupees, paise = f"{abs(value):.2f}".split(".")
        text = cls.group_indian(rupees)
        if always_show_paise or paise != "00":
            text = f"{text}.{paise}"
        return f"{sign}{symbol}{text}"


def number_to_words(n: int) -> str:
    """
    Spell a non-negative integer using the Indian scale.

    >>> number_to_words(2834500)
    'Twenty Eight Lakh Thirty Four Thousand Five Hundred'
    """
    if n < 0:
        raise ValueError("Cannot spell a negative number")

    # "seven hundred and eighty-nine" -> "Seven Hundred Eighty Nine"
    words = num2words(int(n), lang="en_IN").replace(",", " ").replace("-", " ")
    return " ".join(word.title() for word in words.split() if word != "and")


def amount_in_words(amount: Number) -> str:
    """
    Spell a rupee amount for a printed document.

    >>> amount_in_words(Decimal("28000"))
    'Rupees Twenty Eight Thousand Only'
    >>> amount_in_words(Decimal("100.50"))
    'Rupees One Hundred and Fifty Paise Only'
    """
    value = to_decimal(amount).quantize(_PAISE, rounding=ROUND_HALF_UP)
    if value < 0:
        raise ValueError("Cannot spell a negative amount")

    rupees = int(value)
    paise = int((value - rupees) * 100)

    words = f"Rupees {number_to_words(rupees)}"
    if paise:
        words += f" and {number_to_words(paise)} Paise"
    return f"{words} Only"
