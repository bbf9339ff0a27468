"""API router configuration."""

from fastapi import APIRouter

from clinic_api.api.v1.endpoints import (
    appointments,
    audit_logs,
    availability,
    departments,
    health,
    medical_records,
    notifications,
    specialties,
    users,
)

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(users.router)
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(availability.router)
api_router.include_router(medical_records.router)
api_router.include_router(specialties.router)
api_router.include_router(departments.router)
api_router.include_router(notifications.router)
api_router.include_router(audit_logs.router)
