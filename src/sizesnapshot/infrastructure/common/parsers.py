"""Parsing utilities for human-readable sizes."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from sizesnapshot.domain.entities import InvalidSizeError, InvalidUnitError

# pretty-bytes uses SI prefixes with a base of 1000
METRIC_PREFIXES: tuple[str, ...] = ("", "k", "M", "G", "T", "P")


def pretty_bytes_inverse(magnitude: str | int | float, unit: str) -> int:
    """Convert a pretty-bytes display value back to a byte count.

    Only the metric prefix (first character of a unit longer than one
    character) is significant:
        - ("500", "B") -> 500
        - ("2.3", "kB") -> 2300
        - ("1.5", "MB") -> 1500000

    Args:
        magnitude: Numeric display value (string or number).
        unit: Display unit, e.g. "B", "kB", "MB".

    Returns:
        Size in bytes, rounded half-up to a whole byte.

    Raises:
        InvalidUnitError: The unit prefix is not one of "", k, M, G, T, P.
        InvalidSizeError: The magnitude is not a number.
    """
    prefix = "" if len(unit) < 2 else unit[0]
    try:
        index = METRIC_PREFIXES.index(prefix)
    except ValueError:
        allowed = "', '".join(METRIC_PREFIXES)
        raise InvalidUnitError(
            f"unrecognized metric prefix '{prefix}' in unit '{unit}'. "
            f"only '{allowed}' are allowed"
        ) from None

    try:
        value = Decimal(str(magnitude).strip())
    except InvalidOperation as e:
        raise InvalidSizeError(f"invalid size magnitude: {magnitude!r}") from e
    if not value.is_finite() or value < 0:
        raise InvalidSizeError(f"invalid size magnitude: {magnitude!r}")

    scaled = value * (Decimal(10) ** (index * 3))
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))
