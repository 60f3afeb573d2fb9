"""Admin-only gate for destructive operations.

Denial is returned as data rather than raised, so callers render "denied" and
"not found" the same way: a message-bearing result.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.domain.actor import Role

logger = logging.getLogger(__name__)

ADMIN_ONLY_MESSAGE = "Only admin can delete"


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DENIED = "denied"


@dataclass(frozen=True, slots=True)
class ActionResult:
    message: str
    outcome: Outcome = Outcome.OK

    @classmethod
    def ok(cls, message: str) -> ActionResult:
        return cls(message=message, outcome=Outcome.OK)

    @classmethod
    def not_found(cls, message: str) -> ActionResult:
        return cls(message=message, outcome=Outcome.NOT_FOUND)

    @classmethod
    def deny(cls, message: str = ADMIN_ONLY_MESSAGE) -> ActionResult:
        return cls(message=message, outcome=Outcome.DENIED)

    @property
    def denied(self) -> bool:
        return self.outcome is Outcome.DENIED

    def as_dict(self) -> dict[str, str]:
        return {"message": self.message}


GuardedOperation = Callable[..., Awaitable[ActionResult]]


class AdminOnlyGate:
    """Runs the wrapped delete operations only for the ``admin`` role."""

    def __init__(
        self,
        *,
        delete_pet: GuardedOperation,
        delete_treatment: GuardedOperation,
        required_role: Role = Role.ADMIN,
    ) -> None:
        self._delete_pet = delete_pet
        self._delete_treatment = delete_treatment
        self._required_role = required_role

    def allows(self, role: Any) -> bool:
        return role == self._required_role

    async def delete_pet(self, role: Any, pet_id: Any) -> ActionResult:
        return await self._guard(role, self._delete_pet, pet_id)

    async def delete_treatment(self, role: Any, pet_id: Any, treatment_id: Any) -> ActionResult:
        return await self._guard(role, self._delete_treatment, pet_id, treatment_id)

    async def _guard(self, role: Any, operation: GuardedOperation, *args: Any) -> ActionResult:
        if not self.allows(role):
            logger.info("Denied %s for role %r", getattr(operation, "__name__", "operation"), role)
            return ActionResult.deny()
        return await operation(*args)
