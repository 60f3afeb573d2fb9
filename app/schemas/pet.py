import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Owner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone: str | None = None


class OwnerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)


class Pet(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: str
    breed: str | None = None
    age: int | None = None
    owner_id: int
    owner: Owner


class PetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    species: str = Field(..., min_length=1, max_length=100)
    breed: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=0)
    owner: OwnerCreate


class PetUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    species: str | None = Field(None, min_length=1, max_length=100)
    breed: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=0)


class Treatment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    pet_id: int
    vet: str
    date: dt.date
    description: str | None = None
    cost: float | None = None


class TreatmentCreate(BaseModel):
    vet: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    description: str | None = None
    cost: float | None = Field(None, ge=0)


class TreatmentList(BaseModel):
    treatments: list[Treatment]
