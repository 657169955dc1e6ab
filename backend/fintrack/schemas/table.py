"""
Table view schemas: filter, sort and pagination state.
"""

import enum
from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from fintrack.models.transaction import TransactionKind
from fintrack.schemas.transaction import TableRecord


class KindFilter(str, enum.Enum):
    ALL = "SEMUA"
    INCOME = TransactionKind.INCOME.value
    EXPENSE = TransactionKind.EXPENSE.value


class AccountFilter(str, enum.Enum):
    ALL = "SEMUA"
    BANK = "BANK"
    CASH = "CASH"


class NoEndpointFilter(BaseModel):
    model_config = ConfigDict(frozen=True)
    axis: Literal["none"] = "none"


class BySource(BaseModel):
    """Keep rows whose source is one of `names`."""
    model_config = ConfigDict(frozen=True)
    axis: Literal["source"] = "source"
    names: frozenset[str] = frozenset()


class ByDestination(BaseModel):
    """Keep rows whose destination is one of `names`."""
    model_config = ConfigDict(frozen=True)
    axis: Literal["destination"] = "destination"
    names: frozenset[str] = frozenset()


# Source and destination filters are mutually exclusive
EndpointFilter = Annotated[
    Union[NoEndpointFilter, BySource, ByDestination],
    Field(discriminator="axis"),
]


class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    search: str = ""
    description: str = ""
    kind: KindFilter = KindFilter.ALL
    endpoint: EndpointFilter = NoEndpointFilter()
    amount_above: Decimal = Field(Decimal("0"), ge=0)
    amount_below: Decimal = Field(Decimal("0"), ge=0)
    amount_equal: Decimal = Field(Decimal("0"), ge=0)
    account: AccountFilter = AccountFilter.ALL


class SortColumn(str, enum.Enum):
    no = "no"
    date = "date"
    description = "description"
    kind = "kind"
    source = "source"
    destination = "destination"
    amount = "amount"
    is_bank = "is_bank"


class SortDirection(str, enum.Enum):
    asc = "asc"
    desc = "desc"


class SortState(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: SortColumn = SortColumn.no
    direction: SortDirection = SortDirection.asc


class TableState(BaseModel):
    """Everything that decides which rows a table shows."""
    model_config = ConfigDict(frozen=True)

    filter: FilterState = FilterState()
    sort: SortState = SortState()
    page_size: int
    page: int = Field(1, ge=1)
    oldest_date: Optional[date] = None


class TableView(BaseModel):
    items: list[TableRecord]
    total: int
    page: int
    pages: int
    page_size: int
    total_balance: Decimal
