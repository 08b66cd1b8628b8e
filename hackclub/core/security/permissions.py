"""Role-based capabilities.

Every role-restricted route depends on ``require_capability`` instead of
comparing role strings itself. Checks tied to a specific record (team
membership, submission ownership) live in the services that load the record.
"""
import enum

from fastapi import Depends, HTTPException, status

from hackclub.core.security.auth import get_current_user
from hackclub.models.user import RoleType


class Capability(str, enum.Enum):
    CREATE_EVENT = "event:create"
    UPDATE_EVENT = "event:update"
    DELETE_EVENT = "event:delete"
    MARK_ATTENDANCE = "attendance:mark"
    EXPORT_ATTENDANCE = "attendance:export"
    GRADE_SUBMISSION = "submission:grade"
    MANAGE_ROLES = "user:manage-roles"


ROLE_CAPABILITIES = {
    RoleType.USER: frozenset(),
    RoleType.JUDGE: frozenset({Capability.GRADE_SUBMISSION}),
    RoleType.CO_LEAD: frozenset({
        Capability.CREATE_EVENT,
        Capability.UPDATE_EVENT,
        Capability.MARK_ATTENDANCE,
        Capability.EXPORT_ATTENDANCE,
    }),
    RoleType.LEAD: frozenset({
        Capability.CREATE_EVENT,
        Capability.UPDATE_EVENT,
        Capability.DELETE_EVENT,
        Capability.MARK_ATTENDANCE,
        Capability.EXPORT_ATTENDANCE,
    }),
    RoleType.ADMIN: frozenset(Capability),
}


def has_capability(role: RoleType, capability: Capability) -> bool:
    return capability in ROLE_CAPABILITIES.get(role, frozenset())


def require_capability(capability: Capability):
    """Build a dependency that yields the current user if their role grants ``capability``"""

    def dependency(current_user: dict = Depends(get_current_user)):
        if not has_capability(current_user["role"], capability):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role {current_user['role'].value} is not allowed to perform {capability.value}",
            )
        return current_user

    return dependency
