"""Complete appointment process.

``AppointmentFacade.create_complete_appointment`` runs four steps strictly in
order and stops at the first failure:

1. ``PetChecker``         - the referenced pet exists
2. ``UserValidator``      - the acting user carries an identity
3. ``AppointmentCreator`` - the appointment is persisted for that user
4. ``NotificationSender`` - subscribed observers are notified

Nothing is rolled back when a later step fails: an appointment persisted in
step 3 stays persisted if step 4 raises.

The appointment payload may be an object with a ``pet_id`` attribute (the
request schema) or a mapping with a ``pet_id`` key; it is handed to the
store unchanged.

The facade also routes the privileged (delete) operations through the
admin-only gate. Creating an appointment is not privileged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from app.core.activity_log import ActivityLog
from app.domain.actor import Actor
from app.domain.authorization import ActionResult, AdminOnlyGate
from app.domain.notifications import AppointmentEvent, AppointmentNotifier
from app.errors import DomainValidationError, NotFoundError

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "Appointment created and notifications sent!"


def pet_id_of(appointment_data: Any) -> Any:
    if isinstance(appointment_data, Mapping):
        return appointment_data.get("pet_id")
    return getattr(appointment_data, "pet_id", None)


class PetLookup(Protocol):
    async def find(self, pet_id: Any) -> Any | None: ...


class AppointmentStore(Protocol):
    async def create(self, appointment_data: Any, owner_id: Any) -> Any: ...


@dataclass(frozen=True, slots=True)
class CompleteAppointment:
    success: bool
    appointment: Any
    user_id: str
    pet_id: str
    owner: Any
    message: str = CONFIRMATION_MESSAGE


class PetChecker:
    def __init__(self, pets: PetLookup) -> None:
        self._pets = pets

    async def check(self, pet_id: Any) -> Any:
        if not pet_id:
            raise NotFoundError("petId is required")
        pet = await self._pets.find(pet_id)
        if pet is None:
            raise NotFoundError("Pet not found")
        return pet


class UserValidator:
    def __init__(self, activity_log: ActivityLog) -> None:
        self._activity_log = activity_log

    def validate(self, actor: Actor | Any) -> bool:
        self._activity_log.info("User Validator: Validating user")
        if actor is None or not getattr(actor, "id", None):
            raise DomainValidationError("Invalid user")
        return True


class AppointmentCreator:
    def __init__(self, store: AppointmentStore, activity_log: ActivityLog) -> None:
        self._store = store
        self._activity_log = activity_log

    async def create(self, appointment_data: Any, actor: Actor | Any) -> Any:
        self._activity_log.info("Appointment Creator: Creating appointment")
        appointment = await self._store.create(appointment_data, owner_id=actor.id)
        self._activity_log.info("Appointment Creator: Appointment saved")
        return appointment


class NotificationSender:
    def __init__(self, notifier: AppointmentNotifier) -> None:
        self._notifier = notifier

    def send(self, appointment: Any) -> None:
        self._notifier.notify(AppointmentEvent.from_appointment(appointment))


class AppointmentFacade:
    def __init__(
        self,
        *,
        pet_checker: PetChecker,
        user_validator: UserValidator,
        appointment_creator: AppointmentCreator,
        notification_sender: NotificationSender,
        gate: AdminOnlyGate,
        activity_log: ActivityLog,
    ) -> None:
        self.pet_checker = pet_checker
        self.user_validator = user_validator
        self.appointment_creator = appointment_creator
        self.notification_sender = notification_sender
        self.gate = gate
        self._activity_log = activity_log

    @classmethod
    def build(
        cls,
        *,
        pets: PetLookup,
        appointments: AppointmentStore,
        notifier: AppointmentNotifier,
        gate: AdminOnlyGate,
        activity_log: ActivityLog,
    ) -> AppointmentFacade:
        """Wire the default steps around the given collaborators."""
        return cls(
            pet_checker=PetChecker(pets),
            user_validator=UserValidator(activity_log),
            appointment_creator=AppointmentCreator(appointments, activity_log),
            notification_sender=NotificationSender(notifier),
            gate=gate,
            activity_log=activity_log,
        )

    async def create_complete_appointment(
        self, appointment_data: Any, actor: Actor | Any
    ) -> CompleteAppointment:
        self._activity_log.info("Starting Complete Appointment Process...")

        await self.pet_checker.check(pet_id_of(appointment_data))
        self.user_validator.validate(actor)
        appointment = await self.appointment_creator.create(appointment_data, actor)
        self.notification_sender.send(appointment)

        self._activity_log.info("Appointment process completed!")
        logger.debug("Appointment %s created by user %s", getattr(appointment, "id", None), actor.id)

        return CompleteAppointment(
            success=True,
            appointment=appointment,
            user_id=str(appointment.user.id),
            pet_id=str(appointment.pet.id),
            owner=appointment.pet.owner_id,
        )

    async def delete_pet(self, actor: Actor, pet_id: Any) -> ActionResult:
        return await self.gate.delete_pet(actor.role, pet_id)

    async def delete_treatment(self, actor: Actor, pet_id: Any, treatment_id: Any) -> ActionResult:
        return await self.gate.delete_treatment(actor.role, pet_id, treatment_id)
