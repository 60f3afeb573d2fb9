from app.db.models.user import User
from app.db.models.owner import Owner
from app.db.models.pet import Pet
from app.db.models.treatment import Treatment
from app.db.models.appointment import Appointment

__all__ = ["User", "Owner", "Pet", "Treatment", "Appointment"]
