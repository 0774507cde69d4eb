from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email address"""
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        pass
