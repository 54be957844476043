# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import ProfileUpdate, SocialLinks, parse_skills
from ....domain.exceptions import ValidationError
from ....domain.validation import is_blank, require_fields
from ....utils.datetime_utils import utc_now
from ...dto.profile_dto import ProfileUpsertRequest, ProfileResponse

logger = logging.getLogger(__name__)

SOCIAL_LINK_FIELDS = ("youtube", "facebook", "twitter", "instagram", "linkedin")
TEXT_FIELDS = ("status", "company", "website", "location", "bio", "github_username")


def _supplied(value):
    """Treat blank strings like absent fields."""
    return None if is_blank(value) else value.strip()


def build_profile_update(request: ProfileUpsertRequest) -> ProfileUpdate:
    """
    Turn a request into a sparse ProfileUpdate.

    Only fields present (and non-blank) in the request carry a value; social
    links are grouped only when at least one of them was supplied.

    Raises:
        ValidationError: If status or skills is missing
    """
    require_fields(
        {"status": request.status, "skills": request.skills},
        {"status": "Status is required", "skills": "Skills is required"},
    )

    skills = parse_skills(request.skills)
    if not skills:
        raise ValidationError.single("skills", "Skills is required")

    links = {name: _supplied(getattr(request, name)) for name in SOCIAL_LINK_FIELDS}
    social = SocialLinks(**links)

    return ProfileUpdate(
        skills=skills,
        social=None if social.is_empty() else social,
        **{name: _supplied(getattr(request, name)) for name in TEXT_FIELDS},
    )


class UpsertProfileUseCase:
    """Use case for creating the caller's profile, or updating it when it exists"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, user_id: str, request: ProfileUpsertRequest) -> ProfileResponse:
        """
        Create or update the profile owned by user_id

        An existing profile keeps every field the request does not supply.

        Raises:
            ValidationError: If status or skills is missing
        """
        update = build_profile_update(request)

        existing = await self.profile_repository.find_by_owner(user_id)
        if existing is not None:
            profile = update.apply_to(existing)
            action = "updated"
        else:
            profile = update.to_profile(user_id)
            profile.date = utc_now()
            action = "created"

        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"User {user_id} {action} profile {saved_profile.id}")
        return ProfileResponse.from_domain(saved_profile)
