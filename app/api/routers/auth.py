import logging

from fastapi import APIRouter, Depends, Form, status
from sqlalchemy.orm import Session

from app.api.deps import get_activity_log, get_current_user, get_db, get_notifier
from app.core.activity_log import ActivityLog
from app.domain.notifications import AppointmentNotifier, UserObserver
from app.schemas.user import Token, User, UserCreate
from app.services import auth as auth_service
from app.services.user import register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    notifier: AppointmentNotifier = Depends(get_notifier),
    activity_log: ActivityLog = Depends(get_activity_log),
):
    """
    Register a new staff user.
    The user is subscribed to appointment notifications.
    """
    user = register_user(db, user_data)
    notifier.subscribe(UserObserver(user.name, activity_log))
    logger.info("Registered user %s", user.id)
    return User.model_validate(user)


@router.post("/login", response_model=Token)
async def login(
    username: str = Form(...),  # OAuth2 uses "username", but we treat it as email
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """
    Login endpoint - returns JWT token.
    Uses form data for OAuth2 compatibility (Swagger UI authorization).
    The 'username' field should contain the user's email address.
    """
    return await auth_service.login(db, username, password)


@router.get("/me", response_model=User)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current authenticated user information."""
    return User.model_validate(current_user)
