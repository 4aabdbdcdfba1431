"""
Top-level API router aggregating every domain router.
"""

from fastapi import APIRouter

from appointment_manager.domains.appointments.api import router as appointments_router

api_router = APIRouter()
api_router.include_router(appointments_router)
