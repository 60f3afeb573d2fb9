from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Treatment(Base):
    __tablename__ = "treatments"

    id = Column(Integer, primary_key=True, index=True)
    pet_id = Column(Integer, ForeignKey("pets.id"), nullable=False, index=True)
    vet = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    cost = Column(Numeric(10, 2), nullable=True)

    pet = relationship("Pet", back_populates="treatments")
