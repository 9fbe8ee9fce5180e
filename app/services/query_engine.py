"""In-memory query engine: filter, sort and paginate a collection of records.

Records are plain mappings. The engine never mutates its input: every call
works on a locally derived list and returns a fresh :class:`QueryResult`.
It does not log; malformed query descriptors raise :class:`InvalidQuery`,
anomalies in the data itself (missing fields, unparsable dates) only exclude
or reorder records.
"""

from __future__ import annotations

import locale
import math
import unicodedata
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Mapping, Sequence

from app.schemas.query import KNOWN_OPS, EngineQuery, FilterClause, PageRequest, SortSpec

Record = Mapping[str, Any]
Predicate = Callable[[Record], bool]


class InvalidQuery(ValueError):
    pass


@dataclass(frozen=True)
class QueryResult:
    records: tuple
    total_records: int
    total_pages: int
    current_page: int


def _field_value(record: Record, field: str):
    # Absent keys and explicit nulls are the same thing to the engine.
    return record.get(field)


def _is_number(value) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _to_date(value) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        # Accept either YYYY-MM-DD or full ISO datetime and take its date part.
        if "T" in text or " " in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError:
        return None


def _contains(field: str, needle) -> Predicate:
    folded = str(needle if needle is not None else "").casefold()

    def _check(record: Record) -> bool:
        value = _field_value(record, field)
        return isinstance(value, str) and folded in value.casefold()

    return _check


def _equals(field: str, expected) -> Predicate:
    def _check(record: Record) -> bool:
        value = _field_value(record, field)
        return value is not None and value == expected

    return _check


def _range(field: str, bound, op: str) -> Predicate:
    bound_day = _to_date(bound)

    def _check(record: Record) -> bool:
        value = _field_value(record, field)
        if value is None:
            return False
        if _is_number(value) and _is_number(bound):
            left, right = value, bound
        else:
            left = _to_date(value)
            right = bound_day
            if left is None or right is None:
                return False
        return left >= right if op == "gte" else left <= right

    return _check


def _build_predicate(clause: FilterClause) -> Predicate:
    if clause.op == "contains":
        return _contains(clause.field, clause.value)
    if clause.op == "equals":
        return _equals(clause.field, clause.value)
    if clause.op in {"gte", "lte"}:
        return _range(clause.field, clause.value, clause.op)
    raise InvalidQuery(
        f'Unknown filter operator "{clause.op}" for field "{clause.field}" '
        f"(expected one of: {', '.join(KNOWN_OPS)})"
    )


def _collation_base(text: str) -> str:
    # Accents and case only break ties: "Émile" sorts with "emile".
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _compare_text(left: str, right: str) -> int:
    result = locale.strcoll(_collation_base(left), _collation_base(right))
    if result == 0:
        result = locale.strcoll(left.casefold(), right.casefold())
    if result == 0:
        result = locale.strcoll(left, right)
    return (result > 0) - (result < 0)


def _compare_values(left, right) -> int:
    # A missing value is the lowest value of all.
    if left is None or right is None:
        return (left is not None) - (right is not None)
    if isinstance(left, str) and isinstance(right, str):
        return _compare_text(left, right)
    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)
    if isinstance(left, date) and isinstance(right, date):
        same_kind = isinstance(left, datetime) and isinstance(right, datetime) and (
            (left.tzinfo is None) == (right.tzinfo is None)
        )
        if not same_kind:
            left, right = _to_date(left), _to_date(right)
        return (left > right) - (left < right)
    return 0


def _sort_key(sort: SortSpec):
    sign = -1 if sort.direction == "desc" else 1

    def _cmp(a: Record, b: Record) -> int:
        return sign * _compare_values(_field_value(a, sort.field), _field_value(b, sort.field))

    return cmp_to_key(_cmp)


def _validate_page(page: PageRequest) -> None:
    if page.page < 1:
        raise InvalidQuery(f"Page number must be >= 1, got {page.page}")
    if page.size < 1:
        raise InvalidQuery(f"Page size must be >= 1, got {page.size}")


def execute(
    records: Sequence[Record],
    filters: Iterable[FilterClause] = (),
    sort: SortSpec | None = None,
    page: PageRequest | None = None,
) -> QueryResult:
    """Filter, sort and slice ``records``.

    Filters are AND-ed. Without ``sort`` the input order is kept; with it the
    sort is stable and ``desc`` only flips the comparator, so equal keys keep
    their input order in both directions. Values of different types compare
    equal, so a mixed-type column is only partially ordered: two strings
    separated by a number may never be compared with each other.
    ``total_pages`` is never below 1: an empty result is one empty page.
    """
    page = page or PageRequest()
    _validate_page(page)
    predicates = [_build_predicate(clause) for clause in filters]

    rows = [record for record in records if all(check(record) for check in predicates)]
    if sort is not None:
        rows = sorted(rows, key=_sort_key(sort))

    total = len(rows)
    start = (page.page - 1) * page.size
    return QueryResult(
        records=tuple(rows[start:start + page.size]),
        total_records=total,
        total_pages=max(1, math.ceil(total / page.size)),
        current_page=page.page,
    )


def run_query(records: Sequence[Record], query: EngineQuery) -> QueryResult:
    return execute(records, query.filters, query.sort, query.page)
