"""
Source and destination Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class NamedRecordCreate(BaseModel):
    """Schema for creating a source, destination or bank by name."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class SourceResponse(BaseModel):
    """Schema for source response."""
    id: str
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True


class DestinationResponse(BaseModel):
    """Schema for destination response."""
    id: str
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True


class SourceList(BaseModel):
    """Schema for listing sources."""
    items: list[SourceResponse]
    total: int


class DestinationList(BaseModel):
    """Schema for listing destinations."""
    items: list[DestinationResponse]
    total: int
