from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from app.schemas.query import EngineQuery, FilterClause, PageRequest, SortSpec
from app.services.query_engine import InvalidQuery

# Fields every employee record exposes, with their value types.
EMPLOYEE_FIELDS: dict[str, type] = {
    "id": str,
    "name": str,
    "department": str,
    "position": str,
    "hireDate": date,
    "salary": int,
}

DEFAULT_SORT = "name"
DEFAULT_DIRECTION = "asc"

# query-string parameter -> (record field, operator)
FILTER_PARAMS: dict[str, tuple[str, str]] = {
    "name": ("name", "contains"),
    "department": ("department", "equals"),
    "position": ("position", "equals"),
    "startDate": ("hireDate", "gte"),
    "endDate": ("hireDate", "lte"),
}


def _clean(value) -> str:
    return str(value or "").strip()


def _parse_page(raw) -> int:
    text = _clean(raw)
    if not text:
        return 1
    try:
        page = int(text)
    except ValueError:
        raise InvalidQuery(f'Page must be an integer, got "{text}"')
    if page < 1:
        raise InvalidQuery(f"Page number must be >= 1, got {page}")
    return page


def _parse_date_param(name: str, raw: str) -> date:
    try:
        if "T" in raw or " " in raw:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        return date.fromisoformat(raw)
    except ValueError:
        raise InvalidQuery(f'Invalid date for "{name}": "{raw}" (expected YYYY-MM-DD)')


def parse_employee_query(params: Mapping[str, Any], page_size: int) -> EngineQuery:
    """Turn raw query-string parameters into an engine query.

    Only fields from EMPLOYEE_FIELDS can be sorted on; blank parameters are
    treated as absent.
    """
    sort_field = _clean(params.get("sort")) or DEFAULT_SORT
    if sort_field not in EMPLOYEE_FIELDS:
        raise InvalidQuery(f'Unknown sort field "{sort_field}"')
    direction = _clean(params.get("direction")).lower() or DEFAULT_DIRECTION
    if direction not in {"asc", "desc"}:
        raise InvalidQuery(f'Sort direction must be "asc" or "desc", got "{direction}"')

    filters: list[FilterClause] = []
    for param, (field, op) in FILTER_PARAMS.items():
        raw = _clean(params.get(param))
        if not raw:
            continue
        value: Any = raw
        if EMPLOYEE_FIELDS[field] is date:
            value = _parse_date_param(param, raw)
        filters.append(FilterClause(field=field, op=op, value=value))

    return EngineQuery(
        filters=filters,
        sort=SortSpec(field=sort_field, direction=direction),
        page=PageRequest(page=_parse_page(params.get("page")), size=page_size),
    )


def employee_query_params(
    page: int = 1,
    sort: str = DEFAULT_SORT,
    direction: str = DEFAULT_DIRECTION,
    filters: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    params = {"page": str(page), "sort": sort, "direction": direction}
    for key in FILTER_PARAMS:
        value = (filters or {}).get(key)
        if value in (None, ""):
            continue
        if isinstance(value, datetime):
            value = value.date()
        params[key] = value.isoformat() if isinstance(value, date) else str(value)
    return params
