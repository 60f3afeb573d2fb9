from sqlalchemy.orm import Session

import app.repositories.user as user_repo
from app.core.security import get_password_hash, validate_password
from app.db.models.user import User as UserModel
from app.domain.actor import Actor
from app.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from app.schemas.user import UserCreate, UserUpdate


def register_user(db: Session, user_data: UserCreate) -> UserModel:
    """
    Register a new clinic user with business logic validation.

    - Validates password requirements
    - Builds the actor (required fields, trimming, lowercased email)
    - Validates email uniqueness
    - New users always start as "staff"

    Raises:
        DomainValidationError: If the password is too weak or a required field is empty
        DuplicateResourceError: If the email is already registered
    """
    is_valid, error_message = validate_password(user_data.password)
    if not is_valid:
        raise DomainValidationError(error_message)

    actor = Actor(
        name=user_data.name,
        email=user_data.email,
        password=get_password_hash(user_data.password),
        phone=user_data.phone,
        position=user_data.position,
        address=user_data.address,
    )

    if user_repo.get_user_by_email(db, actor.email):
        raise DuplicateResourceError("Email already registered")

    payload = actor.to_request()
    return user_repo.create_user(
        db,
        name=payload["name"],
        email=payload["email"],
        password_hash=payload["password"],
        role=payload["role"],
        phone=payload["phone"],
        position=payload["position"],
        address=payload["address"],
    )


def update_profile(db: Session, current_user: UserModel, user_data: UserUpdate) -> UserModel:
    """
    Update the current user's own profile.

    Empty name, email, password or phone keep the stored value; position and
    address are cleared when sent empty.

    Raises:
        DomainValidationError: If a new password does not meet requirements
        DuplicateResourceError: If the new email belongs to another user
    """
    actor = Actor.from_record(current_user)
    fields = user_data.model_fields_set

    actor.set_name(user_data.name)
    actor.set_phone(user_data.phone)
    actor.set_email(user_data.email)
    if user_data.password:
        is_valid, error_message = validate_password(user_data.password)
        if not is_valid:
            raise DomainValidationError(error_message)
        actor.set_password(get_password_hash(user_data.password))
    if "position" in fields:
        actor.set_position(user_data.position)
    if "address" in fields:
        actor.set_address(user_data.address)

    if actor.email != current_user.email:
        existing_user = user_repo.get_user_by_email(db, actor.email)
        if existing_user and existing_user.id != current_user.id:
            raise DuplicateResourceError("Email already registered")

    payload = actor.to_request()
    return user_repo.update_user(
        db,
        user_id=current_user.id,
        name=payload["name"],
        email=payload["email"],
        password_hash=payload["password"],
        phone=payload["phone"],
        position=payload["position"],
        address=payload["address"],
    )


def change_role(db: Session, user_id: int, role: str, current_user: UserModel) -> UserModel:
    """
    Change another user's role (admin-only, enforced at the router).

    Roles other than "admin" and "staff" are ignored and the user is returned
    unchanged.

    Raises:
        NotFoundError: If the user doesn't exist
        DomainValidationError: If an admin tries to change their own role
    """
    user = user_repo.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    if current_user.id == user_id:
        raise DomainValidationError("You cannot change your own role")

    actor = Actor.from_record(user)
    actor.set_role(role)
    if actor.role.value == user.role:
        return user

    return user_repo.update_user(
        db,
        user_id=user.id,
        role=actor.role.value,
        phone=user.phone,
        position=user.position,
        address=user.address,
    )
