from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Pet(Base):
    __tablename__ = "pets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    species = Column(String(100), nullable=False)
    breed = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("Owner", back_populates="pets")
    treatments = relationship(
        "Treatment", back_populates="pet", cascade="all, delete-orphan"
    )
    appointments = relationship(
        "Appointment", back_populates="pet", cascade="all, delete-orphan"
    )
