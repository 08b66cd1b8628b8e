import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from hackclub.core.security.permissions import Capability, require_capability
from hackclub.crud import users as users_crud
from hackclub.db.session import get_db
from hackclub.schemas.user import RoleUpdateRequest, UserDisplay

logger = logging.getLogger("hackclub.users")

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=List[UserDisplay])
def list_users(
    current_user: dict = Depends(require_capability(Capability.MANAGE_ROLES)),
    db: Session = Depends(get_db)
):
    return [UserDisplay.model_validate(user) for user in users_crud.get_users(db)]

@router.put("/{user_id}/role", response_model=UserDisplay)
def update_user_role(
    user_id: int,
    request: RoleUpdateRequest,
    current_user: dict = Depends(require_capability(Capability.MANAGE_ROLES)),
    db: Session = Depends(get_db)
):
    user = users_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    user = users_crud.set_user_role(db, user, request.role)
    logger.info(f"User {current_user['user'].id} set role of user {user.id} to {user.role.value}")
    return UserDisplay.model_validate(user)
