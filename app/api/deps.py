from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.activity_log import ActivityLog
from app.core.security import decode_token
from app.db import SessionLocal
from app.db.models.user import User
from app.domain.actor import Actor
from app.domain.authorization import AdminOnlyGate
from app.domain.notifications import AppointmentNotifier
from app.services.adapters import AppointmentRecords, PetRecords
from app.services.appointment_facade import AppointmentFacade

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_activity_log(request: Request) -> ActivityLog:
    return request.app.state.activity_log


def get_notifier(request: Request) -> AppointmentNotifier:
    return request.app.state.notifier


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Get the current authenticated user from JWT token."""
    payload = decode_token(token)
    if payload is None:
        raise _credentials_error()

    # Only access tokens authenticate requests
    if payload.get("type") != "access":
        raise _credentials_error()

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise _credentials_error()

    user = db.query(User).filter(User.id == int(subject)).first()
    if user is None:
        raise _credentials_error("User not found")

    return user


def get_current_actor(current_user: User = Depends(get_current_user)) -> Actor:
    """The authenticated user as a domain actor."""
    return Actor.from_record(current_user)


def require_roles(*role_names: str):
    """
    Create a dependency that requires the current user to have one of the specified roles.

    Args:
        *role_names: Variable number of role name strings to allow

    Returns:
        A dependency function that checks if the user has one of the required roles

    Example:
        Depends(require_roles("admin"))
        Depends(require_roles("admin", "staff"))
    """

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in role_names:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions",
            )
        return current_user

    return role_checker


def get_appointment_facade(
    db: Session = Depends(get_db),
    notifier: AppointmentNotifier = Depends(get_notifier),
    activity_log: ActivityLog = Depends(get_activity_log),
) -> AppointmentFacade:
    """Build the appointment facade around the request's session."""
    pets = PetRecords(db)
    gate = AdminOnlyGate(delete_pet=pets.delete_pet, delete_treatment=pets.delete_treatment)
    return AppointmentFacade.build(
        pets=pets,
        appointments=AppointmentRecords(db),
        notifier=notifier,
        gate=gate,
        activity_log=activity_log,
    )
