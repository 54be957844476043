from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.profile import Education, Experience, Profile, SocialLinks
from ...domain.models.user import User


class ProfileUpsertRequest(BaseModel):
    """DTO for create-or-update profile request. skills is comma-separated."""
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    skills: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = Field(default=None, alias="githubusername")
    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = Field(default=None, alias="linkedIn")


class ExperienceCreateRequest(BaseModel):
    """DTO for adding an experience entry"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_date: Optional[datetime] = Field(default=None, alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationCreateRequest(BaseModel):
    """DTO for adding an education entry"""
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = Field(default=None, alias="fieldofstudy")
    from_date: Optional[datetime] = Field(default=None, alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class SocialLinksResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = Field(default=None, alias="linkedIn")

    @classmethod
    def from_domain(cls, social: SocialLinks) -> "SocialLinksResponse":
        return cls(
            youtube=social.youtube,
            facebook=social.facebook,
            twitter=social.twitter,
            instagram=social.instagram,
            linkedin=social.linkedin,
        )


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: datetime = Field(alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: Experience) -> "ExperienceResponse":
        return cls(
            id=entry.id or "",
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    field_of_study: Optional[str] = Field(default=None, alias="fieldofstudy")
    from_date: datetime = Field(alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: Education) -> "EducationResponse":
        return cls(
            id=entry.id or "",
            school=entry.school,
            degree=entry.degree,
            field_of_study=entry.field_of_study,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileOwnerResponse(BaseModel):
    """Owner details joined into profile responses"""
    id: str
    name: str
    avatar: Optional[str] = None


class ProfileResponse(BaseModel):
    """DTO for a profile with its experience and education"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user: str
    owner: Optional[ProfileOwnerResponse] = None
    status: str
    skills: List[str] = []
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = Field(default=None, alias="githubusername")
    social: Optional[SocialLinksResponse] = None
    experience: List[ExperienceResponse] = []
    education: List[EducationResponse] = []
    date: Optional[datetime] = None

    @classmethod
    def from_domain(cls, profile: Profile, owner: Optional[User] = None) -> "ProfileResponse":
        return cls(
            id=profile.id or "",
            user=profile.user,
            owner=(
                ProfileOwnerResponse(id=owner.id or "", name=owner.name, avatar=owner.avatar)
                if owner is not None
                else None
            ),
            status=profile.status,
            skills=list(profile.skills),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            github_username=profile.github_username,
            social=SocialLinksResponse.from_domain(profile.social) if profile.social else None,
            experience=[ExperienceResponse.from_domain(entry) for entry in profile.experience],
            education=[EducationResponse.from_domain(entry) for entry in profile.education],
            date=profile.date,
        )
