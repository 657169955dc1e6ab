"""
Row filters for the transaction table.

Each predicate looks at one record and the current filter state and is
independent of the others; a record is shown only when all of them pass.
Inactive filters (empty text, the SEMUA sentinel, zero thresholds, an
empty name set) always pass.
"""

from typing import Callable, Iterable, List

from fintrack.schemas.table import (
    AccountFilter,
    ByDestination,
    BySource,
    FilterState,
    KindFilter,
)
from fintrack.schemas.transaction import TableRecord

Predicate = Callable[[TableRecord, FilterState], bool]


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def match_general_search(record: TableRecord, state: FilterState) -> bool:
    """Free text over description, source, destination and kind."""
    term = state.search.strip()
    if term == "":
        return True
    fields = [record.description, record.source or "", record.destination or "", record.kind.value]
    return any(_contains(field, term) for field in fields)


def match_date(record: TableRecord, state: FilterState) -> bool:
    """Inclusive date window; a missing bound is open."""
    if state.start_date is not None and record.date < state.start_date:
        return False
    if state.end_date is not None and record.date > state.end_date:
        return False
    return True


def match_description(record: TableRecord, state: FilterState) -> bool:
    term = state.description.strip()
    if term == "":
        return True
    return _contains(record.description, term)


def match_kind(record: TableRecord, state: FilterState) -> bool:
    if state.kind == KindFilter.ALL:
        return True
    return record.kind.value == state.kind.value


def match_source(record: TableRecord, state: FilterState) -> bool:
    endpoint = state.endpoint
    if not isinstance(endpoint, BySource) or not endpoint.names:
        return True
    return record.source in endpoint.names


def match_destination(record: TableRecord, state: FilterState) -> bool:
    endpoint = state.endpoint
    if not isinstance(endpoint, ByDestination) or not endpoint.names:
        return True
    return record.destination in endpoint.names


def match_amount(record: TableRecord, state: FilterState) -> bool:
    """
    Amount thresholds, each active only when greater than zero.

    `amount_above` keeps rows strictly above it, `amount_below` keeps rows
    strictly below it and `amount_equal` keeps rows equal to it.
    """
    if state.amount_above > 0 and record.amount <= state.amount_above:
        return False
    if state.amount_below > 0 and record.amount >= state.amount_below:
        return False
    if state.amount_equal > 0 and record.amount != state.amount_equal:
        return False
    return True


def match_account(record: TableRecord, state: FilterState) -> bool:
    if state.account == AccountFilter.BANK:
        return record.is_bank
    if state.account == AccountFilter.CASH:
        return not record.is_bank
    return True


PREDICATES: List[Predicate] = [
    match_general_search,
    match_date,
    match_description,
    match_kind,
    match_source,
    match_destination,
    match_amount,
    match_account,
]


def matches(record: TableRecord, state: FilterState) -> bool:
    return all(predicate(record, state) for predicate in PREDICATES)


def filter_records(records: Iterable[TableRecord], state: FilterState) -> List[TableRecord]:
    """Records passing every predicate, in input order."""
    return [record for record in records if matches(record, state)]
