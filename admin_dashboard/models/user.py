"""User model and the user-role join table."""
import uuid

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from admin_dashboard.database import Base


def generate_uid() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Employee account used for authentication and reporting lines."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    uid = Column(String(36), unique=True, index=True, nullable=False, default=generate_uid)
    employee_id = Column(String(50), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    birthdate = Column(Date, nullable=True)
    join_date = Column(Date, nullable=False)
    profile_image = Column(String(255), nullable=True)
    division_id = Column(Integer, ForeignKey("divisions.id"), nullable=True)
    position_id = Column(Integer, ForeignKey("positions.id"), nullable=True)
    is_manager = Column(Boolean, default=False, nullable=False)
    manager_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    created_by = Column(String(50), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    updated_by = Column(String(50), nullable=True)

    # Relationships
    division = relationship("Division")
    position = relationship("Position")
    manager = relationship("User", remote_side=[id], back_populates="subordinates")
    subordinates = relationship("User", back_populates="manager")
    roles = relationship("Role", secondary="user_roles", viewonly=True, order_by="Role.name")


class UserRole(Base):
    """Assignment of a role to a user. Owned by the user."""
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    created_by = Column(String(50), nullable=True)

    user = relationship("User")
    role = relationship("Role")
