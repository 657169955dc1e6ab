"""
Destination API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_current_email, get_db
from fintrack.schemas.record import DestinationList, DestinationResponse, NamedRecordCreate
from fintrack.services import record_service

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("", response_model=DestinationList)
def list_destinations(
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """List the user's destinations."""
    destinations = record_service.list_destinations(db, email)
    return DestinationList(
        items=[DestinationResponse.model_validate(d) for d in destinations],
        total=len(destinations)
    )


@router.post("", response_model=DestinationResponse, status_code=201)
def create_destination(
    destination: NamedRecordCreate,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """Create a destination. Names are unique per user, ignoring case."""
    try:
        return record_service.create_destination(db, email, destination.name)
    except record_service.DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
