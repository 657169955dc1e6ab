"""
Pydantic schemas package.
"""

from fintrack.schemas.record import (
    NamedRecordCreate,
    SourceResponse,
    DestinationResponse,
    SourceList,
    DestinationList,
)
from fintrack.schemas.bank import (
    BankResponse,
    BankList,
    OwnerBalances,
)
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TableRecord,
    TransactionListResponse,
)
from fintrack.schemas.table import (
    KindFilter,
    AccountFilter,
    NoEndpointFilter,
    BySource,
    ByDestination,
    EndpointFilter,
    FilterState,
    SortColumn,
    SortDirection,
    SortState,
    TableState,
    TableView,
)

__all__ = [
    "NamedRecordCreate",
    "SourceResponse",
    "DestinationResponse",
    "SourceList",
    "DestinationList",
    "BankResponse",
    "BankList",
    "OwnerBalances",
    "TransactionCreate",
    "TransactionResponse",
    "TableRecord",
    "TransactionListResponse",
    "KindFilter",
    "AccountFilter",
    "NoEndpointFilter",
    "BySource",
    "ByDestination",
    "EndpointFilter",
    "FilterState",
    "SortColumn",
    "SortDirection",
    "SortState",
    "TableState",
    "TableView",
]
