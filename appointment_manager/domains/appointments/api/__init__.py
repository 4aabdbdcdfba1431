"""
Appointments API

FastAPI router, schemas and dependency wiring for appointments.
"""

from appointment_manager.domains.appointments.api.routes import router

__all__ = ["router"]
