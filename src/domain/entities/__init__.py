"""
GlamConnect Domain Entities

Each entity in its own file.
"""

from .enums import UserRole
from .account import Account
from .profile import Profile

__all__ = [
    # Enums
    "UserRole",
    # Entities
    "Account",
    "Profile",
]
