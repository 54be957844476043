from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.profile import (
    UpsertProfileUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile use case provider - registers profile and account use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all profile use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            UpsertProfileUseCase,
            AddExperienceUseCase,
            RemoveExperienceUseCase,
            AddEducationUseCase,
            RemoveEducationUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    profile_repository=container.get(ProfileRepository)
                )
            )

        # Reads join the owner's current name and avatar
        for use_case_class in (GetProfileByUserUseCase, ListProfilesUseCase):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    profile_repository=container.get(ProfileRepository),
                    user_repository=container.get(UserRepository),
                )
            )

        container.register_factory(
            DeleteAccountUseCase,
            lambda: DeleteAccountUseCase(
                profile_repository=container.get(ProfileRepository),
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
