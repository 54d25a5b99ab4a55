from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

ZERO = Decimal("0")


def field_of(record: Any, name: str, default: Any = None) -> Any:
    """Reads `name` from a mapping or an attribute-style record."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def to_amount(value: Any) -> Decimal:
    """Parses an amount coming from the data layer (Decimal, number or decimal string)."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")


def label_of(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
