from fastapi import Query
from fastapi.exceptions import RequestValidationError

from app.config import settings
from app.repositories import SortOrder

_DIRECTIONS = frozenset({"asc", "desc"})


def parse_sort(values: list[str]) -> list[SortOrder]:
    """
    Turn ``sort`` query values into ``SortOrder`` terms.

    Each value is ``property[,property...][,asc|desc]``; the direction
    applies to every property listed before it and defaults to ``asc``.
    Whether a property is sortable is left to the repository.
    """
    orders: list[SortOrder] = []
    for raw in values:
        tokens = [t.strip() for t in raw.split(",") if t.strip()]
        if not tokens:
            continue
        direction = "asc"
        if len(tokens) > 1 and tokens[-1].lower() in _DIRECTIONS:
            direction = tokens.pop().lower()
        for prop in tokens:
            if prop.lower() in _DIRECTIONS:
                raise RequestValidationError(
                    [
                        {
                            "type": "value_error",
                            "loc": ("query", "sort"),
                            "msg": f"Invalid sort term {raw!r}",
                            "input": raw,
                        }
                    ]
                )
            orders.append(SortOrder(property=prop, direction=direction))
    return orders


class PageRequest:
    """
    FastAPI dependency that parses the list endpoint's pagination and
    sorting query parameters.

    Attributes
    ----------
    page:
        0-based page number.
    size:
        Items per page, clamped to ``settings.MAX_PAGE_SIZE``.
    sort:
        Parsed ``SortOrder`` terms in the order given.
    """

    def __init__(
        self,
        page: int = Query(0, ge=0, description="Page number (0-based)."),
        size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            description="Number of products per page.",
        ),
        sort: list[str] = Query(
            [],
            description="Sort term 'property[,asc|desc]'; repeatable.",
        ),
    ) -> None:
        self.page = page
        self.size = min(size, settings.MAX_PAGE_SIZE)
        self.sort = parse_sort(sort)

    @property
    def offset(self) -> int:
        return self.page * self.size
