from sqlalchemy.orm import Session

import app.repositories.pet as pet_repo
import app.repositories.treatment as treatment_repo
from app.db.models.pet import Pet as PetModel
from app.db.models.treatment import Treatment as TreatmentModel
from app.domain.authorization import ActionResult
from app.errors import NotFoundError
from app.schemas.pet import PetCreate, PetUpdate, TreatmentCreate


def create_pet(db: Session, pet_data: PetCreate) -> PetModel:
    """Create a pet and its owner record."""
    return pet_repo.create_pet(
        db,
        name=pet_data.name.strip(),
        species=pet_data.species.strip(),
        breed=pet_data.breed,
        age=pet_data.age,
        owner_name=pet_data.owner.name.strip(),
        owner_phone=pet_data.owner.phone,
    )


def get_pet(db: Session, pet_id: int) -> PetModel:
    """
    Raises:
        NotFoundError: If pet doesn't exist
    """
    pet = pet_repo.get_pet_by_id(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")
    return pet


def update_pet(db: Session, pet_id: int, pet_data: PetUpdate) -> PetModel:
    return pet_repo.update_pet(
        db,
        pet_id=pet_id,
        name=pet_data.name,
        species=pet_data.species,
        breed=pet_data.breed,
        age=pet_data.age,
    )


def delete_pet(db: Session, pet_id: int) -> ActionResult:
    """
    Delete a pet with its treatments and appointments.

    A missing pet is a regular outcome, not an error.
    """
    if not pet_repo.get_pet_by_id(db, pet_id):
        return ActionResult.not_found("Pet not found")
    pet_repo.delete_pet(db, pet_id)
    return ActionResult.ok("Pet deleted")


def add_treatment(db: Session, pet_id: int, treatment_data: TreatmentCreate) -> TreatmentModel:
    """
    Record a treatment for an existing pet.

    Raises:
        NotFoundError: If pet doesn't exist
    """
    get_pet(db, pet_id)
    return treatment_repo.create_treatment(
        db,
        pet_id=pet_id,
        vet=treatment_data.vet.strip(),
        date=treatment_data.date,
        description=treatment_data.description,
        cost=treatment_data.cost,
    )


def list_treatments(db: Session, pet_id: int) -> list[TreatmentModel]:
    """
    Raises:
        NotFoundError: If pet doesn't exist
    """
    get_pet(db, pet_id)
    return treatment_repo.get_treatments_by_pet_id(db, pet_id)


def delete_treatment(db: Session, pet_id: int, treatment_id: int) -> ActionResult:
    """Delete one treatment of a pet; a missing treatment is a regular outcome."""
    if not treatment_repo.get_treatment(db, pet_id, treatment_id):
        return ActionResult.not_found("Treatment not found")
    treatment_repo.delete_treatment(db, pet_id, treatment_id)
    return ActionResult.ok("Treatment deleted")
