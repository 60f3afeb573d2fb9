"""The acting user of a request: identity, role and derived permissions."""

from __future__ import annotations

from enum import Enum
from typing import Any

from starlette.concurrency import run_in_threadpool

from app.core.security import verify_password
from app.errors import DomainValidationError


class Role(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"


ROLE_NAMES = frozenset(role.value for role in Role)

# Every actor holds the same view capabilities; role does not elevate them.
BASE_PERMISSIONS = frozenset({"appointment:view", "pet:view", "treatment:view"})


def _clean(value: Any) -> str | None:
    if not value:
        return None
    return str(value).strip() or None


class Actor:
    """An authenticated clinic user.

    ``password`` is the stored credential (a bcrypt hash for persisted users).
    Setters keep the previous value when given empty input, except for
    position and address which may be cleared.
    """

    def __init__(
        self,
        *,
        name: str,
        email: str,
        password: str,
        id: Any = None,
        phone: str | None = None,
        role: str | Role = Role.STAFF.value,
        position: str | None = None,
        address: str | None = None,
    ) -> None:
        if not _clean(name) or not _clean(email) or not password:
            raise DomainValidationError("User: name, email, password are required")

        self._id = id
        self._name = str(name).strip()
        self._phone = _clean(phone)
        self._email = str(email).strip().lower()
        self._password = password
        self._position = _clean(position)
        self._address = _clean(address)
        self._role = Role.STAFF
        self.set_role(role)

    @classmethod
    def from_record(cls, user: Any) -> Actor:
        """Build an actor from a persisted user row."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password_hash,
            phone=user.phone,
            role=user.role,
            position=user.position,
            address=user.address,
        )

    @property
    def id(self) -> Any:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def position(self) -> str | None:
        return self._position

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def role(self) -> Role:
        return self._role

    def set_name(self, name: str | None) -> None:
        if not name:
            return
        self._name = str(name).strip()

    def set_phone(self, phone: str | None) -> None:
        if not phone:
            return
        self._phone = str(phone).strip()

    def set_email(self, email: str | None) -> None:
        if not email:
            return
        self._email = str(email).strip().lower()

    def set_password(self, password: str | None) -> None:
        if not password:
            return
        self._password = str(password)

    def set_role(self, role: str | Role | Any) -> None:
        """Assign ``admin`` or ``staff``; any other value is ignored."""
        candidate = role.value if isinstance(role, Role) else str(role).strip()
        if candidate in ROLE_NAMES:
            self._role = Role(candidate)

    def set_position(self, position: str | None) -> None:
        self._position = _clean(position)

    def set_address(self, address: str | None) -> None:
        self._address = _clean(address)

    def permissions(self) -> frozenset[str]:
        return BASE_PERMISSIONS

    async def verify_credential(self, candidate: str | None) -> bool:
        """Compare ``candidate`` with the stored password hash off the event loop.

        A stored value that is not a recognised hash never matches.
        """
        try:
            return await run_in_threadpool(verify_password, str(candidate or ""), self._password)
        except ValueError:
            return False

    def to_request(self) -> dict[str, Any]:
        """Submission-shaped payload; carries the credential, not the identity."""
        return {
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "password": self._password,
            "position": self._position,
            "address": self._address,
            "role": self._role.value,
        }

    def to_record(self) -> dict[str, Any]:
        """Persisted-record shape; carries the identity, never the credential."""
        return {
            "id": self._id,
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "position": self._position,
            "address": self._address,
            "role": self._role.value,
        }

    def __repr__(self) -> str:
        return f"Actor(id={self._id!r}, email={self._email!r}, role={self._role.value!r})"
