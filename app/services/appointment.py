from sqlalchemy.orm import Session

import app.repositories.appointment as appointment_repo
from app.db.models.appointment import Appointment as AppointmentModel
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate


def create_appointment(
    db: Session, appointment_data: AppointmentCreate, user_id: int
) -> AppointmentModel:
    """Persist an appointment owned by ``user_id`` and return it with its user and pet loaded."""
    appointment = appointment_repo.create_appointment(
        db,
        pet_id=appointment_data.pet_id,
        user_id=user_id,
        date=appointment_data.date,
        description=appointment_data.description,
    )
    return appointment_repo.get_appointment_by_id(db, appointment.id)


def list_appointments(
    db: Session, user_id: int, pet_id: int | None = None
) -> list[AppointmentModel]:
    return appointment_repo.get_appointments_by_user_id(db, user_id, pet_id=pet_id)


def update_appointment(
    db: Session, appointment_id: int, appointment_data: AppointmentUpdate
) -> AppointmentModel:
    """
    Raises:
        NotFoundError: If appointment doesn't exist
    """
    return appointment_repo.update_appointment(
        db,
        appointment_id=appointment_id,
        date=appointment_data.date,
        description=appointment_data.description,
    )


def delete_appointment(db: Session, appointment_id: int) -> dict[str, str]:
    """
    Raises:
        NotFoundError: If appointment doesn't exist
    """
    appointment_repo.delete_appointment(db, appointment_id)
    return {"message": "Appointment deleted"}
