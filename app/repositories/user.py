from sqlalchemy.orm import Session

from app.db.models.user import User as UserModel
from app.errors import NotFoundError


def get_user_by_email(db: Session, email: str) -> UserModel | None:
    """Get a user by email (emails are stored lowercased)."""
    return db.query(UserModel).filter(UserModel.email == email.strip().lower()).first()


def get_user_by_id(db: Session, user_id: int) -> UserModel | None:
    """Get a user by ID."""
    return db.query(UserModel).filter(UserModel.id == user_id).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password_hash: str,
    role: str = "staff",
    phone: str | None = None,
    position: str | None = None,
    address: str | None = None,
) -> UserModel:
    """Create a new user in the database. Pure data access - no business logic."""
    db_user = UserModel(
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        phone=phone,
        position=position,
        address=address,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(
    db: Session,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    password_hash: str | None = None,
    role: str | None = None,
    phone: str | None = None,
    position: str | None = None,
    address: str | None = None,
) -> UserModel:
    """Overwrite the profile columns of a user.

    ``name``, ``email``, ``password_hash`` and ``role`` are only written when
    provided; ``phone``, ``position`` and ``address`` are written as given.
    """
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if password_hash is not None:
        user.password_hash = password_hash
    if role is not None:
        user.role = role
    user.phone = phone
    user.position = position
    user.address = address

    db.commit()
    db.refresh(user)
    return user
