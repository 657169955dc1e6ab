"""
Transaction API endpoints.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fintrack.dependencies import get_current_email, get_db
from fintrack.schemas.table import (
    AccountFilter,
    ByDestination,
    BySource,
    KindFilter,
    NoEndpointFilter,
    SortColumn,
    SortDirection,
    SortState,
    TableView,
)
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
)
from fintrack.services import record_service
from fintrack.services.table_view import (
    ChangeFilter,
    ChangePage,
    ChangePageSize,
    ChangeSort,
    initial_state,
    oldest_date,
    reduce,
    render,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """All of the user's transactions, newest first and numbered."""
    records = record_service.table_records(db, email)
    return TransactionListResponse(items=records, total=len(records))


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """Book a new income or expense."""
    try:
        return record_service.create_transaction(db, email, transaction)
    except record_service.RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/table", response_model=TableView)
def transaction_table(
    search: str = "",
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    description: str = "",
    kind: KindFilter = KindFilter.ALL,
    sources: List[str] = Query([]),
    destinations: List[str] = Query([]),
    amount_above: Decimal = Query(Decimal("0"), ge=0),
    amount_below: Decimal = Query(Decimal("0"), ge=0),
    amount_equal: Decimal = Query(Decimal("0"), ge=0),
    account: AccountFilter = AccountFilter.ALL,
    sort_by: SortColumn = SortColumn.no,
    direction: SortDirection = SortDirection.asc,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = None,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """
    Filtered, sorted and paginated transaction table.

    Omitted date bounds default to the oldest transaction and today.
    `total` and `total_balance` cover every filtered row, not just the page.
    """
    if sources and destinations:
        raise HTTPException(
            status_code=422,
            detail="Filter by sources or by destinations, not both"
        )

    records = record_service.table_records(db, email)

    changes = {
        "search": search,
        "description": description,
        "kind": kind,
        "amount_above": amount_above,
        "amount_below": amount_below,
        "amount_equal": amount_equal,
        "account": account,
    }
    if start_date is not None:
        changes["start_date"] = start_date
    if end_date is not None:
        changes["end_date"] = end_date
    if sources:
        changes["endpoint"] = BySource(names=frozenset(sources))
    elif destinations:
        changes["endpoint"] = ByDestination(names=frozenset(destinations))
    else:
        changes["endpoint"] = NoEndpointFilter()

    try:
        state = initial_state(oldest_date(records), date.today())
        state = reduce(state, ChangeFilter(changes=changes))
        state = reduce(state, ChangeSort(sort=SortState(column=sort_by, direction=direction)))
        if page_size is not None:
            state = reduce(state, ChangePageSize(page_size=page_size))
        state = reduce(state, ChangePage(page=page))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return render(records, state)
