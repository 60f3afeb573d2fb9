"""Domain-level policies and business rules.

This package contains logic that defines *what* the business rules are,
independent from *where* they are applied (services, repositories, routers):
the acting user and its permissions, the admin-only gate for destructive
operations, and the appointment notification fan-out.
"""

from app.domain.actor import BASE_PERMISSIONS, Actor, Role
from app.domain.authorization import ADMIN_ONLY_MESSAGE, ActionResult, AdminOnlyGate, Outcome
from app.domain.notifications import (
    AppointmentEvent,
    AppointmentNotifier,
    Observer,
    PetObserver,
    UserObserver,
)

__all__ = [
    "ADMIN_ONLY_MESSAGE",
    "BASE_PERMISSIONS",
    "ActionResult",
    "Actor",
    "AdminOnlyGate",
    "AppointmentEvent",
    "AppointmentNotifier",
    "Observer",
    "Outcome",
    "PetObserver",
    "Role",
    "UserObserver",
]
