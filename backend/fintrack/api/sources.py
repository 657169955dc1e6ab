"""
Source API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_current_email, get_db
from fintrack.schemas.record import NamedRecordCreate, SourceList, SourceResponse
from fintrack.services import record_service

router = APIRouter(prefix="/sources", tags=["sources"])


@router.get("", response_model=SourceList)
def list_sources(
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """List the user's sources."""
    sources = record_service.list_sources(db, email)
    return SourceList(
        items=[SourceResponse.model_validate(s) for s in sources],
        total=len(sources)
    )


@router.post("", response_model=SourceResponse, status_code=201)
def create_source(
    source: NamedRecordCreate,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """Create a source. Names are unique per user, ignoring case."""
    try:
        return record_service.create_source(db, email, source.name)
    except record_service.DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
