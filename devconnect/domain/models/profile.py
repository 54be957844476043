# Standard library imports
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import List, Optional


def parse_skills(raw_skills: str) -> List[str]:
    """
    Split a comma-separated skills string into a list.

    Each segment is trimmed, order is preserved, case is untouched and empty
    segments are dropped: "node, react , Go" -> ["node", "react", "Go"].
    """
    return [skill.strip() for skill in raw_skills.split(",") if skill.strip()]


@dataclass
class SocialLinks:
    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class Experience:
    """Work history entry embedded in a profile."""
    id: Optional[str]
    title: str
    company: str
    from_date: datetime
    location: Optional[str] = None
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or not self.title.strip():
            raise ValueError("Title is required")
        if not self.company or not self.company.strip():
            raise ValueError("Company is required")
        if self.from_date is None:
            raise ValueError("From date is required")


@dataclass
class Education:
    """Education history entry embedded in a profile."""
    id: Optional[str]
    school: str
    degree: str
    from_date: datetime
    field_of_study: Optional[str] = None
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.school or not self.school.strip():
            raise ValueError("School is required")
        if not self.degree or not self.degree.strip():
            raise ValueError("Degree is required")
        if self.from_date is None:
            raise ValueError("From date is required")


@dataclass
class Profile:
    """
    Pure domain model for Profile aggregate.

    One profile per user. Experience and education entries are stored
    most-recent-first and persisted together with the profile.
    """
    id: Optional[str]
    user: str
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: Optional[SocialLinks] = None
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user:
            raise ValueError("Profile owner is required")


@dataclass
class ProfileUpdate:
    """
    Sparse set of profile fields.

    None means "not supplied": on update the previous value is kept, on
    create the attribute is left at its default.
    """
    status: Optional[str] = None
    skills: Optional[List[str]] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: Optional[SocialLinks] = None

    def supplied(self) -> dict:
        """Return only the attributes that carry a value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def apply_to(self, profile: Profile) -> Profile:
        """Merge supplied fields over an existing profile."""
        return replace(profile, **self.supplied())

    def to_profile(self, user_id: str) -> Profile:
        """Build a new profile for user_id from the supplied fields."""
        values = self.supplied()
        return Profile(
            id=None,
            user=user_id,
            status=values.pop("status", ""),
            skills=values.pop("skills", []),
            **values,
        )
