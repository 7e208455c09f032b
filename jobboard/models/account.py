"""
Account model
Candidates, employers and admins share one shape; employer branding
fields are simply left empty for the other roles
"""
import enum
from typing import List, Optional

from pydantic import BaseModel


class UserRole(str, enum.Enum):
    CANDIDATE = "CANDIDATE"
    EMPLOYER = "EMPLOYER"
    ADMIN = "ADMIN"


# Profile fields a user may edit on their own account
PROFILE_FIELDS = (
    "name", "email", "location", "bio", "companyName", "companyLogo",
    "profilePic", "resumeUrl", "skills", "website", "githubUrl",
    "linkedinUrl", "teamPhotos", "cultureDescription",
)


class Account(BaseModel):
    """A registered user as seen by the session (no credential)"""

    id: str
    email: str
    role: UserRole
    name: str

    # Employer branding
    companyName: Optional[str] = None
    companyLogo: Optional[str] = None  # data URL
    teamPhotos: Optional[List[str]] = None
    cultureDescription: Optional[str] = None

    # Candidate profile
    profilePic: Optional[str] = None  # data URL
    resumeUrl: Optional[str] = None  # data URL
    skills: Optional[List[str]] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    githubUrl: Optional[str] = None
    linkedinUrl: Optional[str] = None

    def __repr__(self):
        return f"<Account {self.email} ({self.role.value})>"


class StoredAccount(Account):
    """
    Account as kept in the accounts collection.
    The password is stored in plaintext for parity with the browser
    version; do not reuse this for anything real.
    """
    password: Optional[str] = None

    def to_session(self) -> Account:
        return Account(**self.model_dump(exclude={"password"}))
