"""Validation of par and sips values received from clients."""

from __future__ import annotations

from typing import Any

# Signed 64-bit range of an SQLite INTEGER column.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class ValidationError(ValueError):
    """Raised when a payload value is not an acceptable number."""


def _parse_integral(value: Any, name: str) -> int:
    # bool is an int subclass; JSON true/false are not scores.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{name} must be a whole number")
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValidationError(f"{name} is out of range")
    return number


def parse_sips(value: Any) -> int:
    """Return ``value`` as a non-negative sip count."""

    sips = _parse_integral(value, "sips")
    if sips < 0:
        raise ValidationError("sips must not be negative")
    return sips


def parse_par(value: Any) -> int:
    """Return ``value`` as a par. No lower bound is enforced here."""

    return _parse_integral(value, "par")


__all__ = ["ValidationError", "parse_par", "parse_sips"]
