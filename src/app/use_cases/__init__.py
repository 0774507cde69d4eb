"""
Use Cases

Organized into domain folders:
- auth/: Signup flow
"""

from .auth import SignupUseCase

__all__ = [
    # Auth
    "SignupUseCase",
]
