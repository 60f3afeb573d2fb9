from datetime import date

from sqlalchemy.orm import Session

from app.db.models.treatment import Treatment as TreatmentModel
from app.errors import NotFoundError


def get_treatment(db: Session, pet_id: int, treatment_id: int) -> TreatmentModel | None:
    """Get a treatment by ID, scoped to its pet."""
    return (
        db.query(TreatmentModel)
        .filter(TreatmentModel.id == treatment_id, TreatmentModel.pet_id == pet_id)
        .first()
    )


def get_treatments_by_pet_id(db: Session, pet_id: int) -> list[TreatmentModel]:
    """Get all treatments of a pet, oldest first."""
    return (
        db.query(TreatmentModel)
        .filter(TreatmentModel.pet_id == pet_id)
        .order_by(TreatmentModel.date, TreatmentModel.id)
        .all()
    )


def create_treatment(
    db: Session,
    pet_id: int,
    vet: str,
    date: date,
    description: str | None = None,
    cost: float | None = None,
) -> TreatmentModel:
    """Create a new treatment in the database. Pure data access - no business logic."""
    db_treatment = TreatmentModel(
        pet_id=pet_id,
        vet=vet,
        date=date,
        description=description,
        cost=cost,
    )
    db.add(db_treatment)
    db.commit()
    db.refresh(db_treatment)
    return db_treatment


def delete_treatment(db: Session, pet_id: int, treatment_id: int) -> None:
    """Delete a treatment."""
    treatment = get_treatment(db, pet_id, treatment_id)
    if not treatment:
        raise NotFoundError("Treatment not found")

    db.delete(treatment)
    db.commit()
