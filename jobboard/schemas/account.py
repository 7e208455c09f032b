"""
Pydantic schemas for Account API
"""
from pydantic import BaseModel
from typing import Optional, List
from jobboard.models.account import UserRole


class SignupRequest(BaseModel):
    name: str
    email: str
    password: str
    role: UserRole = UserRole.CANDIDATE


class LoginRequest(BaseModel):
    email: str
    password: str


class AccountUpdate(BaseModel):
    """Partial profile update; no field-level validation"""
    name: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    companyName: Optional[str] = None
    companyLogo: Optional[str] = None
    profilePic: Optional[str] = None
    resumeUrl: Optional[str] = None
    skills: Optional[List[str]] = None
    website: Optional[str] = None
    githubUrl: Optional[str] = None
    linkedinUrl: Optional[str] = None
    teamPhotos: Optional[List[str]] = None
    cultureDescription: Optional[str] = None


class ProfileDraft(AccountUpdate):
    """In-progress profile form"""
    pass


class ProfileDraftResponse(BaseModel):
    draft: dict
    is_dirty: bool
