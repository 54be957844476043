from .upsert_profile import UpsertProfileUseCase, build_profile_update
from .get_profile import GetProfileByUserUseCase, ListProfilesUseCase
from .profile_entries import (
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
)
from .delete_account import DeleteAccountUseCase

__all__ = [
    "UpsertProfileUseCase",
    "build_profile_update",
    "GetProfileByUserUseCase",
    "ListProfilesUseCase",
    "AddExperienceUseCase",
    "RemoveExperienceUseCase",
    "AddEducationUseCase",
    "RemoveEducationUseCase",
    "DeleteAccountUseCase",
]
