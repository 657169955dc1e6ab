"""
Table view state machine: filter -> sort -> paginate.

State is immutable. Every user interaction is an action, and `reduce`
returns the next state. Any change to the filter, the sort or the page
size brings the table back to page 1.
"""

import logging
import math
import time
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from fintrack.config import settings
from fintrack.schemas.table import FilterState, SortDirection, SortState, TableState, TableView
from fintrack.schemas.transaction import TableRecord
from fintrack.services.balance_service import net_total
from fintrack.services.filters import filter_records

logger = logging.getLogger(__name__)


class ChangeFilter(BaseModel):
    model_config = ConfigDict(frozen=True)
    changes: Dict[str, Any]


class ResetFilter(BaseModel):
    model_config = ConfigDict(frozen=True)
    today: date


class ChangeSort(BaseModel):
    model_config = ConfigDict(frozen=True)
    sort: SortState


class ChangePageSize(BaseModel):
    model_config = ConfigDict(frozen=True)
    page_size: int


class ChangePage(BaseModel):
    model_config = ConfigDict(frozen=True)
    page: int


Action = Union[ChangeFilter, ResetFilter, ChangeSort, ChangePageSize, ChangePage]


def oldest_date(records: Iterable[TableRecord]) -> Optional[date]:
    dates = [r.date for r in records]
    return min(dates) if dates else None


def default_filter(oldest: Optional[date], today: date) -> FilterState:
    """Filter with every axis inactive and the date window oldest..today."""
    return FilterState(start_date=oldest, end_date=today)


def initial_state(oldest: Optional[date], today: date, page_size: Optional[int] = None) -> TableState:
    return TableState(
        filter=default_filter(oldest, today),
        page_size=_checked_page_size(page_size or settings.default_page_size),
        oldest_date=oldest,
    )


def _checked_page_size(page_size: int) -> int:
    if page_size not in settings.page_sizes:
        raise ValueError(f"Page size must be one of {settings.page_sizes}, got {page_size}")
    return page_size


def reduce(state: TableState, action: Action) -> TableState:
    """Apply one action to a table state."""
    if isinstance(action, ChangeFilter):
        merged = {**dict(state.filter), **action.changes}
        return state.model_copy(update={"filter": FilterState.model_validate(merged), "page": 1})

    if isinstance(action, ResetFilter):
        reset = default_filter(state.oldest_date, action.today)
        return state.model_copy(update={"filter": reset, "page": 1})

    if isinstance(action, ChangeSort):
        return state.model_copy(update={"sort": action.sort, "page": 1})

    if isinstance(action, ChangePageSize):
        return state.model_copy(update={"page_size": _checked_page_size(action.page_size), "page": 1})

    if isinstance(action, ChangePage):
        if action.page < 1:
            raise ValueError(f"Page must be 1 or greater, got {action.page}")
        return state.model_copy(update={"page": action.page})

    raise TypeError(f"Unknown table action: {type(action).__name__}")


def _sort_key(column: str):
    def key(record: TableRecord):
        value = getattr(record, column)
        # Empty values sort last ascending and first descending
        return (value is None, value)
    return key


def sort_records(records: List[TableRecord], sort: SortState) -> List[TableRecord]:
    """Stable sort; rows with equal keys keep their order in both directions."""
    return sorted(
        records,
        key=_sort_key(sort.column.value),
        reverse=sort.direction == SortDirection.desc,
    )


def page_window(records: List[TableRecord], page: int, page_size: int) -> List[TableRecord]:
    """Rows of one page. A page past the end is simply empty."""
    start = (page - 1) * page_size
    return records[start:start + page_size]


def render(records: Iterable[TableRecord], state: TableState) -> TableView:
    filtered = filter_records(records, state.filter)
    ordered = sort_records(filtered, state.sort)
    total = len(filtered)

    return TableView(
        items=page_window(ordered, state.page, state.page_size),
        total=total,
        page=state.page,
        pages=math.ceil(total / state.page_size),
        page_size=state.page_size,
        total_balance=net_total(filtered),
    )


class SearchDebouncer:
    """
    Holds back the general search text until typing has paused.

    Times are in seconds from any monotonic clock.
    """

    def __init__(self, delay_ms: Optional[int] = None):
        self.delay = (delay_ms if delay_ms is not None else settings.search_debounce_ms) / 1000
        self._pending: Optional[str] = None
        self._typed_at = 0.0

    @property
    def pending(self) -> Optional[str]:
        return self._pending

    def push(self, term: str, now: float) -> None:
        self._pending = term
        self._typed_at = now

    def flush(self, now: float) -> Optional[str]:
        """Pending term once the quiet period has passed, else None."""
        if self._pending is None or now - self._typed_at < self.delay:
            return None
        term, self._pending = self._pending, None
        return term


class TableController:
    """One table instance: its records, its state and its search box."""

    def __init__(
        self,
        records: Iterable[TableRecord],
        today: Optional[date] = None,
        page_size: Optional[int] = None,
        debouncer: Optional[SearchDebouncer] = None,
    ):
        self.records = list(records)
        self.state = initial_state(oldest_date(self.records), today or date.today(), page_size)
        self.debouncer = debouncer or SearchDebouncer()

    def dispatch(self, action: Action) -> TableState:
        self.state = reduce(self.state, action)
        return self.state

    def type_search(self, term: str, now: Optional[float] = None) -> None:
        self.debouncer.push(term, time.monotonic() if now is None else now)

    def tick(self, now: Optional[float] = None) -> bool:
        """Apply the pending search text if it has settled. True when applied."""
        term = self.debouncer.flush(time.monotonic() if now is None else now)
        if term is None:
            return False
        logger.debug(f"Applying search term {term!r}")
        self.dispatch(ChangeFilter(changes={"search": term}))
        return True

    def view(self) -> TableView:
        return render(self.records, self.state)
