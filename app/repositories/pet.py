from sqlalchemy.orm import Session, joinedload

from app.db.models.owner import Owner as OwnerModel
from app.db.models.pet import Pet as PetModel
from app.errors import NotFoundError


def get_pet_by_id(db: Session, pet_id: int) -> PetModel | None:
    """Get a pet (with its owner) by ID."""
    return (
        db.query(PetModel)
        .options(joinedload(PetModel.owner))
        .filter(PetModel.id == pet_id)
        .first()
    )


def get_pets_paginated(
    db: Session, page: int = 1, page_size: int = 100
) -> tuple[list[PetModel], int]:
    """
    Get pets with pagination, sorted by name then ID for stable pagination.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page

    Returns:
        Tuple of (list of pets, total count)
    """
    query = db.query(PetModel).options(joinedload(PetModel.owner))
    total = query.count()
    skip = (page - 1) * page_size
    pets = (
        query.order_by(PetModel.name, PetModel.id).offset(skip).limit(page_size).all()
    )
    return pets, total


def create_pet(
    db: Session,
    name: str,
    species: str,
    owner_name: str,
    owner_phone: str | None = None,
    breed: str | None = None,
    age: int | None = None,
) -> PetModel:
    """Create a pet together with its owner record. Pure data access - no business logic."""
    owner = OwnerModel(name=owner_name, phone=owner_phone)
    db_pet = PetModel(name=name, species=species, breed=breed, age=age, owner=owner)
    db.add(db_pet)
    db.commit()
    db.refresh(db_pet)
    return db_pet


def update_pet(
    db: Session,
    pet_id: int,
    name: str | None = None,
    species: str | None = None,
    breed: str | None = None,
    age: int | None = None,
) -> PetModel:
    """Update a pet. Only provided fields will be updated."""
    pet = get_pet_by_id(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")

    if name is not None:
        pet.name = name
    if species is not None:
        pet.species = species
    if breed is not None:
        pet.breed = breed
    if age is not None:
        pet.age = age

    db.commit()
    db.refresh(pet)
    return pet


def delete_pet(db: Session, pet_id: int) -> None:
    """Delete a pet; its treatments and appointments go with it."""
    pet = get_pet_by_id(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")

    db.delete(pet)
    db.commit()
