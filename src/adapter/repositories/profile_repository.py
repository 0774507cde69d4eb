from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email address (exact match, as the unique index)"""
        stmt = select(Profile).where(Profile.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
