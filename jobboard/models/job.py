"""
Job posting model
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, Field


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"      # Awaiting admin approval
    ACTIVE = "ACTIVE"        # Listed and accepting applications
    INACTIVE = "INACTIVE"    # Paused by employer or admin
    REJECTED = "REJECTED"    # Refused by admin
    DELETED = "DELETED"      # Soft-deleted, kept in storage


class Job(BaseModel):
    id: str
    employerId: str  # Acts as owner id
    companyName: str
    companyLogo: Optional[str] = None
    title: str
    location: str = "Remote"
    salary: str = "Competitive"
    skills: List[str] = Field(default_factory=list)
    description: str = ""
    postedAt: str
    updatedAt: str
    type: str = "Full-time"
    status: JobStatus = JobStatus.ACTIVE

    def __repr__(self):
        return f"<Job {self.title} [{self.status.value}]>"
