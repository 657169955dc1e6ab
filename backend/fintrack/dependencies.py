"""
FastAPI dependencies.
"""

from typing import Generator, Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from fintrack.config import settings
from fintrack.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_email(request: Request) -> str:
    """
    Email of the signed-in user, as forwarded by the identity provider.
    """
    email: Optional[str] = request.headers.get(settings.user_email_header)
    if not email or not email.strip():
        raise HTTPException(status_code=401, detail="Not authenticated")
    return email.strip().lower()


def get_admin_email(email: str = Depends(get_current_email)) -> str:
    """
    Email of the signed-in user, who must be listed in `admin_emails`.
    """
    admins = {admin.strip().lower() for admin in settings.admin_emails}
    if email not in admins:
        raise HTTPException(status_code=403, detail="Admin access required")
    return email
