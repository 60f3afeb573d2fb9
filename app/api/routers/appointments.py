from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_appointment_facade, get_current_actor, get_current_user, get_db
from app.db.models.user import User
from app.domain.actor import Actor
from app.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentCreated,
    AppointmentUpdate,
)
from app.schemas.message import MessageResponse
from app.services import appointment as appointment_service
from app.services.appointment_facade import AppointmentFacade

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentCreated, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    facade: AppointmentFacade = Depends(get_appointment_facade),
    actor: Actor = Depends(get_current_actor),
):
    """
    Book an appointment for a pet on behalf of the current user.
    Subscribed users and pets are notified once it is saved.
    """
    result = await facade.create_complete_appointment(appointment_data, actor)
    return AppointmentCreated(
        success=result.success,
        appointment=Appointment.model_validate(result.appointment),
        user_id=result.user_id,
        pet_id=result.pet_id,
        owner=result.owner,
        message=result.message,
    )


@router.get("", response_model=list[Appointment])
def get_appointments(
    pet_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the current user's appointments, optionally for a single pet."""
    appointments = appointment_service.list_appointments(db, current_user.id, pet_id=pet_id)
    return [Appointment.model_validate(a) for a in appointments]


@router.put("/{appointment_id}", response_model=Appointment)
def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    appointment = appointment_service.update_appointment(db, appointment_id, appointment_data)
    return Appointment.model_validate(appointment)


@router.delete("/{appointment_id}", response_model=MessageResponse)
def delete_appointment(
    appointment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return appointment_service.delete_appointment(db, appointment_id)
