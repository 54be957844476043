"""Constants for Profile model field names"""


class ProfileFields:
    """Field name constants for Profile model"""
    ID = "id"
    USER = "user"
    STATUS = "status"
    SKILLS = "skills"
    COMPANY = "company"
    WEBSITE = "website"
    LOCATION = "location"
    BIO = "bio"
    GITHUB_USERNAME = "githubusername"
    SOCIAL = "social"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    DATE = "date"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class SocialFields:
    """Field name constants for the embedded social links document"""
    YOUTUBE = "youtube"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedIn"


class ExperienceFields:
    """Field name constants for embedded Experience documents"""
    TITLE = "title"
    COMPANY = "company"
    LOCATION = "location"
    FROM = "from"
    TO = "to"
    CURRENT = "current"
    DESCRIPTION = "description"

    MONGO_ID = "_id"


class EducationFields:
    """Field name constants for embedded Education documents"""
    SCHOOL = "school"
    DEGREE = "degree"
    FIELD_OF_STUDY = "fieldofstudy"
    FROM = "from"
    TO = "to"
    CURRENT = "current"
    DESCRIPTION = "description"

    MONGO_ID = "_id"
