"""Shared "number + unit" parsing used by every domain verifier."""

from __future__ import annotations

import re

from agri_verify.models.domain import Quantity

# (token pattern, normalized unit, factor to the normalized unit)
_UNITS: tuple[tuple[str, str, float], ...] = (
    (r"kilograms?|kgs?", "kg", 1.0),
    (r"quintals?|q", "kg", 100.0),
    (r"tonnes?|tons?|t", "kg", 1000.0),
    (r"days?", "days", 1.0),
    (r"weeks?", "days", 7.0),
    (r"months?", "days", 30.0),
    (r"[°º]\s*c(?:elsius)?|deg(?:rees?)?\s*c(?:elsius)?|celsius", "celsius", 1.0),
    (r"%|per\s*cent", "percent", 1.0),
    (r"rupees?", "rupees", 1.0),
)

_DIGITS = r"(?P<number>\d{1,3}(?:,\d{2,3})+(?:\.\d+)?|\d+(?:\.\d+)?)"
# A minus sign only counts when it is not glued to a preceding word or digit,
# so "110-150 days" reads as 150 rather than -150.
_NUMBER = r"(?<![\w.,])(?P<sign>-)?" + _DIGITS

_NUMBER_RE = re.compile(_NUMBER)
_QUANTITY_RE = re.compile(
    _NUMBER + r"\s*(?P<unit>" + "|".join(p for p, _, _ in _UNITS) + r")(?![a-z])",
    re.IGNORECASE,
)
_CURRENCY_PREFIX_RE = re.compile(r"(?:₹|\brs\.?|\binr)\s*" + _DIGITS, re.IGNORECASE)


def parse_number(text: str) -> float:
    """Parse a matched number token, dropping thousands separators."""
    return float(text.replace(",", ""))


def _normalize_unit(token: str) -> tuple[str, float]:
    token = token.lower()
    for pattern, unit, factor in _UNITS:
        if re.fullmatch(pattern, token):
            return unit, factor
    raise ValueError(f"Unrecognized unit token: {token!r}")


def find_quantities(text: str, unit: str | None = None) -> list[Quantity]:
    """Return every unit-tagged number in ``text`` in order of appearance.

    Values are normalized: masses to kg, durations to days. Pass ``unit`` to
    keep only one normalized unit ("kg", "days", "celsius", "percent", "rupees").
    """
    found: list[tuple[int, Quantity]] = []
    for match in _QUANTITY_RE.finditer(text):
        norm_unit, factor = _normalize_unit(match.group("unit"))
        value = parse_number(match.group("number")) * factor
        if match.group("sign"):
            value = -value
        found.append((match.start(), Quantity(value=value, unit=norm_unit, raw=match.group(0))))

    for match in _CURRENCY_PREFIX_RE.finditer(text):
        value = parse_number(match.group("number"))
        found.append((match.start(), Quantity(value=value, unit="rupees", raw=match.group(0))))

    found.sort(key=lambda item: item[0])
    quantities = [q for _, q in found]
    if unit is not None:
        quantities = [q for q in quantities if q.unit == unit]
    return quantities


def first_quantity(text: str, unit: str) -> Quantity | None:
    quantities = find_quantities(text, unit)
    return quantities[0] if quantities else None


def find_numbers(text: str) -> list[float]:
    """All numbers in ``text``, with or without a unit."""
    values = []
    for match in _NUMBER_RE.finditer(text):
        value = parse_number(match.group("number"))
        values.append(-value if match.group("sign") else value)
    return values


def format_number(value: float) -> str:
    """Render a reference value for a correction: 4000.0 -> "4000", 1.25 -> "1.25"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
