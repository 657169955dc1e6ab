"""
Main API router.
"""

from fastapi import APIRouter
from fintrack.api import banks, destinations, sources, transactions

api_router = APIRouter()

api_router.include_router(sources.router)
api_router.include_router(destinations.router)
api_router.include_router(banks.router)
api_router.include_router(transactions.router)
