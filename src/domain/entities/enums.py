"""
GlamConnect Domain Enums

Enumeration types used across domain entities and signup DTOs.
"""

from enum import Enum


class UserRole(str, Enum):
    """Marketplace role chosen at signup"""

    customer = "customer"
    artist = "artist"
