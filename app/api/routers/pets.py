from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

import app.repositories.pet as pet_repo
from app.api.deps import (
    get_activity_log,
    get_appointment_facade,
    get_current_actor,
    get_current_user,
    get_db,
    get_notifier,
)
from app.api.exception_handlers import action_result_response
from app.core.activity_log import ActivityLog
from app.domain.actor import Actor
from app.domain.notifications import AppointmentNotifier, PetObserver
from app.schemas.message import MessageResponse
from app.schemas.pagination import PaginatedResponse
from app.schemas.pet import Pet, PetCreate, PetUpdate, Treatment, TreatmentCreate, TreatmentList
from app.services import pet as pet_service
from app.services.appointment_facade import AppointmentFacade

router = APIRouter(prefix="/pets", tags=["pets"])


@router.post("", response_model=Pet, status_code=status.HTTP_201_CREATED)
def create_new_pet(
    pet_data: PetCreate,
    db: Session = Depends(get_db),
    notifier: AppointmentNotifier = Depends(get_notifier),
    activity_log: ActivityLog = Depends(get_activity_log),
    current_user=Depends(get_current_user),
):
    """
    Create a pet together with its owner.
    The pet is subscribed to appointment notifications.
    """
    pet = pet_service.create_pet(db, pet_data)
    notifier.subscribe(PetObserver(pet.name, activity_log))
    return Pet.model_validate(pet)


@router.get("", response_model=PaginatedResponse[Pet])
def get_all_pets(
    page: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    """Get all pets, paginated and sorted by name."""
    pets, total = pet_repo.get_pets_paginated(db, page=page, page_size=page_size)
    return PaginatedResponse[Pet](
        items=[Pet.model_validate(pet) for pet in pets],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{pet_id}", response_model=Pet)
def get_pet_by_id(
    pet_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return Pet.model_validate(pet_service.get_pet(db, pet_id))


@router.put("/{pet_id}", response_model=Pet)
def update_pet_by_id(
    pet_id: int,
    pet_data: PetUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return Pet.model_validate(pet_service.update_pet(db, pet_id, pet_data))


@router.delete("/{pet_id}", response_model=MessageResponse)
async def delete_pet_by_id(
    pet_id: int,
    facade: AppointmentFacade = Depends(get_appointment_facade),
    actor: Actor = Depends(get_current_actor),
):
    """
    Delete a pet with its treatments and appointments. Only admin users can delete.

    Denied and not-found outcomes are returned as a message, like a success.
    """
    result = await facade.delete_pet(actor, pet_id)
    return action_result_response(result)


@router.post(
    "/{pet_id}/treatments",
    response_model=Treatment,
    status_code=status.HTTP_201_CREATED,
)
def add_treatment(
    pet_id: int,
    treatment_data: TreatmentCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    treatment = pet_service.add_treatment(db, pet_id, treatment_data)
    return Treatment.model_validate(treatment)


@router.get("/{pet_id}/treatments", response_model=TreatmentList)
def get_treatments(
    pet_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    treatments = pet_service.list_treatments(db, pet_id)
    return TreatmentList(treatments=[Treatment.model_validate(t) for t in treatments])


@router.delete("/{pet_id}/treatments/{treatment_id}", response_model=MessageResponse)
async def delete_treatment(
    pet_id: int,
    treatment_id: int,
    facade: AppointmentFacade = Depends(get_appointment_facade),
    actor: Actor = Depends(get_current_actor),
):
    """Delete a treatment. Only admin users can delete."""
    result = await facade.delete_treatment(actor, pet_id, treatment_id)
    return action_result_response(result)
