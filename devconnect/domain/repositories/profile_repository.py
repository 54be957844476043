from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.profile import Profile


class ProfileRepository(ABC):
    """Repository interface - defines contract for profile data access"""

    @abstractmethod
    async def find_by_id(self, profile_id: str) -> Optional[Profile]:
        """Find profile by ID"""
        pass

    @abstractmethod
    async def find_by_owner(self, user_id: str) -> Optional[Profile]:
        """Find the profile owned by a user"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Find all profiles"""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save profile with its experience and education (create or replace)"""
        pass

    @abstractmethod
    async def remove(self, profile: Profile) -> None:
        """Remove a profile"""
        pass
