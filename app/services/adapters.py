"""Async views over the synchronous repositories and services.

The appointment facade and the admin-only gate await their collaborators;
these adapters run the SQLAlchemy calls in the threadpool, one at a time, on
the request's session.
"""

from typing import Any

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

import app.repositories.pet as pet_repo
import app.services.appointment as appointment_service
import app.services.pet as pet_service
from app.db.models.appointment import Appointment as AppointmentModel
from app.db.models.pet import Pet as PetModel
from app.domain.authorization import ActionResult


class PetRecords:
    def __init__(self, db: Session) -> None:
        self._db = db

    async def find(self, pet_id: Any) -> PetModel | None:
        return await run_in_threadpool(pet_repo.get_pet_by_id, self._db, pet_id)

    async def delete_pet(self, pet_id: Any) -> ActionResult:
        return await run_in_threadpool(pet_service.delete_pet, self._db, pet_id)

    async def delete_treatment(self, pet_id: Any, treatment_id: Any) -> ActionResult:
        return await run_in_threadpool(
            pet_service.delete_treatment, self._db, pet_id, treatment_id
        )


class AppointmentRecords:
    def __init__(self, db: Session) -> None:
        self._db = db

    async def create(self, appointment_data: Any, owner_id: Any) -> AppointmentModel:
        return await run_in_threadpool(
            appointment_service.create_appointment, self._db, appointment_data, owner_id
        )
