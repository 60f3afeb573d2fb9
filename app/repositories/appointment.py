from datetime import date

from sqlalchemy.orm import Session, joinedload

from app.db.models.appointment import Appointment as AppointmentModel
from app.db.models.pet import Pet as PetModel
from app.errors import NotFoundError


def get_appointment_by_id(db: Session, appointment_id: int) -> AppointmentModel | None:
    """Get an appointment with its user and pet references loaded."""
    return (
        db.query(AppointmentModel)
        .options(
            joinedload(AppointmentModel.user),
            joinedload(AppointmentModel.pet).joinedload(PetModel.owner),
        )
        .filter(AppointmentModel.id == appointment_id)
        .first()
    )


def get_appointments_by_user_id(
    db: Session, user_id: int, pet_id: int | None = None
) -> list[AppointmentModel]:
    """Get the appointments booked by a user, optionally for a single pet."""
    query = db.query(AppointmentModel).filter(AppointmentModel.user_id == user_id)
    if pet_id is not None:
        query = query.filter(AppointmentModel.pet_id == pet_id)
    return query.order_by(AppointmentModel.date, AppointmentModel.id).all()


def create_appointment(
    db: Session,
    pet_id: int,
    user_id: int,
    date: date,
    description: str | None = None,
) -> AppointmentModel:
    """Create a new appointment in the database. Pure data access - no business logic."""
    db_appointment = AppointmentModel(
        pet_id=pet_id,
        user_id=user_id,
        date=date,
        description=description,
    )
    db.add(db_appointment)
    db.commit()
    db.refresh(db_appointment)
    return db_appointment


def update_appointment(
    db: Session,
    appointment_id: int,
    date: date | None = None,
    description: str | None = None,
) -> AppointmentModel:
    """Update an appointment. Only provided fields will be updated."""
    appointment = get_appointment_by_id(db, appointment_id)
    if not appointment:
        raise NotFoundError("Appointment not found")

    if date is not None:
        appointment.date = date
    if description is not None:
        appointment.description = description

    db.commit()
    db.refresh(appointment)
    return appointment


def delete_appointment(db: Session, appointment_id: int) -> None:
    """Delete an appointment."""
    appointment = get_appointment_by_id(db, appointment_id)
    if not appointment:
        raise NotFoundError("Appointment not found")

    db.delete(appointment)
    db.commit()
