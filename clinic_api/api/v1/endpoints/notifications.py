"""Notification endpoints."""

from fastapi import APIRouter

from clinic_api.dependencies import CurrentCaller, NotificationServiceDep
from clinic_api.schemas.notifications import Notification

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[Notification], summary="List my notifications")
async def list_notifications(
    caller: CurrentCaller,
    notifications: NotificationServiceDep,
) -> list[Notification]:
    """
    List notifications addressed to the authenticated user.

    Args:
        caller: Authenticated user
        notifications: Notification service

    Returns:
        Notifications in the order they were created
    """
    return await notifications.get_notifications_by_user_id(caller.user_id)
