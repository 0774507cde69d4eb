"""
Profile Entity

Public profile row created alongside every account.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import UserRole


class Profile(SQLModel, table=True):
    """
    Profile entity - the marketplace identity of an account.

    Business Rules:
    - One profile per account, sharing the account id
    - Email is unique; duplicate-account detection reads it
    """

    __tablename__ = "profiles"

    id: UUID = Field(foreign_key="accounts.id", primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    username: str = Field(max_length=255)
    full_name: str = Field(max_length=255)
    role: UserRole = Field(default=UserRole.customer)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
