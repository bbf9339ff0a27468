"""Access gate: token authentication and role/ownership authorization.

The functions here are pure checks over a supplied identity. FastAPI wiring
lives in ``clinic_api.dependencies``.
"""

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from clinic_api.config import Settings
from clinic_api.core.exceptions import InvalidTokenException, UnauthenticatedException
from clinic_api.core.security import decode_access_token


class Role(str, Enum):
    """User role enumeration."""

    PATIENT = "Patient"
    DOCTOR = "Doctor"
    ADMIN = "Admin"


@dataclass(frozen=True)
class CallerContext:
    """Authenticated identity of the caller."""

    user_id: int
    role: Role


def authenticate(raw_token: str | None, settings: Settings | None = None) -> CallerContext:
    """
    Resolve a bearer token into the caller's identity.

    Args:
        raw_token: Token taken from the Authorization header, if any
        settings: Settings holding the verification key

    Returns:
        Caller identity

    Raises:
        UnauthenticatedException: If no token was supplied
        InvalidTokenException: If the token fails verification
    """
    if not raw_token:
        raise UnauthenticatedException()

    payload = decode_access_token(raw_token, settings)
    if payload is None:
        raise InvalidTokenException()

    try:
        user_id = int(payload["sub"])
        role = Role(payload["role"])
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenException()

    return CallerContext(user_id=user_id, role=role)


def authorize_role(role: Role, allowed_roles: Collection[Role]) -> bool:
    """Check that the role is one of the allowed roles."""
    return role in allowed_roles


def authorize_ownership(
    caller_id: int,
    role: Role,
    resource_owner_id: int,
    exempt_roles: Collection[Role] = (),
) -> bool:
    """Check that the caller owns the resource or holds an exempt role."""
    return role in exempt_roles or caller_id == resource_owner_id
