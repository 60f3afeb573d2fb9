from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_actor, get_current_user, get_db, require_roles
from app.db.models.user import User as UserModel
from app.domain.actor import Actor
from app.schemas.user import Permissions, RoleUpdate, User, UserUpdate
from app.services.user import change_role, update_profile

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=User)
def get_profile(current_user: UserModel = Depends(get_current_user)):
    """Get the current user's profile."""
    return User.model_validate(current_user)


@router.put("/me", response_model=User)
def update_my_profile(
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Update the current user's profile.
    Empty values for name, email, password and phone keep the stored values.
    """
    user = update_profile(db, current_user, user_data)
    return User.model_validate(user)


@router.get("/me/permissions", response_model=Permissions)
def get_my_permissions(actor: Actor = Depends(get_current_actor)):
    """List the capabilities held by the current user."""
    return Permissions(role=actor.role.value, permissions=sorted(actor.permissions()))


@router.put("/{user_id}/role", response_model=User)
def update_user_role(
    user_id: int,
    role_data: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles("admin")),
):
    """
    Change a user's role. Only admin users can change roles.
    Values other than "admin" and "staff" leave the role unchanged.
    """
    user = change_role(db, user_id, role_data.role, current_user)
    return User.model_validate(user)
