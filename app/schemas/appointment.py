import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Appointment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    pet_id: int
    user_id: int
    date: dt.date
    description: str | None = None


class AppointmentCreate(BaseModel):
    pet_id: int | None = None
    date: dt.date
    description: str | None = Field(None, max_length=1000)


class AppointmentUpdate(BaseModel):
    date: dt.date | None = None
    description: str | None = Field(None, max_length=1000)


class AppointmentCreated(BaseModel):
    """Result of the complete appointment process."""

    success: bool
    appointment: Appointment
    user_id: str
    pet_id: str
    owner: int
    message: str
