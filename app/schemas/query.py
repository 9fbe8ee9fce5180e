from pydantic import BaseModel
from typing import Any, List, Literal, Optional

# Operators are checked by the engine, not here, so that an unknown one
# surfaces as InvalidQuery instead of a pydantic ValidationError.
KNOWN_OPS = ("contains", "equals", "gte", "lte")
Dir = Literal["asc", "desc"]

class FilterClause(BaseModel):
    field: str
    op: str
    value: Any

class SortSpec(BaseModel):
    field: str
    direction: Dir = "asc"

class PageRequest(BaseModel):
    page: int = 1
    size: int = 10

class EngineQuery(BaseModel):
    filters: List[FilterClause] = []
    sort: Optional[SortSpec] = None
    page: PageRequest = PageRequest()
