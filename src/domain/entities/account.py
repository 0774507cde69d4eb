"""
Account Entity

Authentication record owned by the Account & Profile Service.
"""

from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - credentials for one email address.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash (cost factor 12)
    - user_metadata keeps the signup metadata (full_name, username, role)
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    user_metadata: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
