"""Department endpoints."""

from fastapi import APIRouter

from clinic_api.dependencies import CurrentCaller, DirectoryServiceDep
from clinic_api.schemas.directory import Department

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=list[Department], summary="List departments")
async def list_departments(caller: CurrentCaller, service: DirectoryServiceDep) -> list[Department]:
    """List all clinic departments."""
    return await service.get_all_departments()
