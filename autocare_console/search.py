"""
Client-side search over rows already fetched for a list page.
"""
from typing import Any, Iterable, Mapping, Sequence

QUOTATION_SEARCH_FIELDS = ("customer_name", "customer_mobile", "vehicle_number")

TRANSACTION_SEARCH_FIELDS = (
    "part_number",
    "part_name",
    "description",
    "manufacturer",
    "quantity",
    "price",
    "update_at",
)

LOW_STOCK_THRESHOLD = 2


def _value(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def matches(row: Any, term: str, fields: Sequence[str]) -> bool:
    needle = term.lower()
    for field in fields:
        value = _value(row, field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_rows(rows: Iterable[Any], term: str, fields: Sequence[str]) -> list:
    """Case-insensitive substring match of ``term`` on any of ``fields``."""
    rows = list(rows)
    term = (term or "").strip()
    if not term:
        return rows
    return [row for row in rows if matches(row, term, fields)]


def count_low_stock(rows: Iterable[Any], threshold: int = LOW_STOCK_THRESHOLD) -> int:
    count = 0
    for row in rows:
        try:
            quantity = float(_value(row, "quantity"))
        except (TypeError, ValueError):
            continue
        if quantity < threshold:
            count += 1
    return count
