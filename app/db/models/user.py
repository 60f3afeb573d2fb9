from sqlalchemy import CheckConstraint, Column, Integer, String

from app.db.base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint("role IN ('admin', 'staff')", name="ck_users_role"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), unique=True, nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    password_hash = Column(String, nullable=False)
    role = Column(String(20), nullable=False, default="staff")
    position = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
