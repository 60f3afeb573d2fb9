from pydantic import BaseModel, ConfigDict, EmailStr, Field


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    role: str
    position: str | None = None
    address: str | None = None


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=500)


class UserUpdate(BaseModel):
    """Profile changes. Empty values keep the stored ones."""

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=320)
    password: str | None = None
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=500)


class RoleUpdate(BaseModel):
    # Plain string: unknown roles are accepted and ignored by the domain.
    role: str


class Permissions(BaseModel):
    role: str
    permissions: list[str]


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User
