"""Appointment notification fan-out.

Observers subscribe once and receive every published event synchronously, in
subscription order. Delivery is at-most-once, best-effort and in-process.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Protocol

from app.core.activity_log import ActivityLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppointmentEvent:
    """Summary of a persisted appointment, delivered to observers."""

    appointment_id: Any
    pet_id: Any
    user_id: Any
    date: Any = None
    description: str | None = None

    @classmethod
    def from_appointment(cls, appointment: Any) -> AppointmentEvent:
        return cls(
            appointment_id=getattr(appointment, "id", None),
            pet_id=appointment.pet.id,
            user_id=appointment.user.id,
            date=getattr(appointment, "date", None),
            description=getattr(appointment, "description", None),
        )

    def __str__(self) -> str:
        text = f"appointment {self.appointment_id} for pet {self.pet_id} on {self.date}"
        if self.description:
            text += f" ({self.description})"
        return text


class Observer(Protocol):
    def update(self, event: Any) -> None: ...


class UserObserver:
    def __init__(self, name: str, activity_log: ActivityLog) -> None:
        self.name = name
        self._activity_log = activity_log

    def update(self, event: Any) -> None:
        self._activity_log.info(f"User {self.name} received notification: {event}")


class PetObserver:
    def __init__(self, pet_name: str, activity_log: ActivityLog) -> None:
        self.pet_name = pet_name
        self._activity_log = activity_log

    def update(self, event: Any) -> None:
        self._activity_log.info(f"Pet {self.pet_name} received notification: {event}")


class AppointmentNotifier:
    """Registry of observers shared by every request for the process lifetime.

    With ``isolate_failures`` off, the first observer that raises aborts the
    delivery and the error reaches the publisher. With it on, failures are
    logged and delivery continues with the next observer.
    """

    def __init__(
        self,
        activity_log: ActivityLog | None = None,
        *,
        isolate_failures: bool = False,
    ) -> None:
        self._observers: list[Observer] = []
        self._lock = threading.Lock()
        self._activity_log = activity_log
        self.isolate_failures = isolate_failures

    @property
    def observers(self) -> tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def subscribe(self, observer: Observer) -> None:
        with self._lock:
            self._observers.append(observer)

    def notify(self, event: Any) -> None:
        # Iterate over a snapshot so concurrent subscribes never mutate the loop.
        for observer in self.observers:
            if not self.isolate_failures:
                observer.update(event)
                continue
            try:
                observer.update(event)
            except Exception as exc:
                logger.exception("Observer %r failed to handle %s", observer, event)
                if self._activity_log is not None:
                    self._activity_log.error(f"Notification delivery failed: {exc}")
