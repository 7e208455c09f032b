"""
Application and interview models
An application embeds at most one interview; rescheduling overwrites it
"""
import enum
from typing import Optional

from pydantic import BaseModel


class ApplicationStatus(str, enum.Enum):
    APPLIED = "APPLIED"                          # Just applied
    UNDER_REVIEW = "UNDER_REVIEW"
    SHORTLISTED = "SHORTLISTED"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    REJECTED = "REJECTED"
    HIRED = "HIRED"

    @property
    def label(self) -> str:
        """Value as shown in notifications, first separator replaced"""
        return self.value.replace("_", " ", 1)


class InterviewMode(str, enum.Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


class Interview(BaseModel):
    id: str
    applicationId: str
    name: str = ""  # Round name
    date: str
    time: str
    mode: InterviewMode
    locationLink: str = ""  # Address or meeting link
    notes: str = ""

    def __repr__(self):
        return f"<Interview {self.name} for Application #{self.applicationId}>"


class Application(BaseModel):
    """
    candidateName and jobTitle are snapshots taken when the application
    is created; later profile or job edits do not touch them
    """
    id: str
    jobId: str
    candidateId: str
    status: ApplicationStatus = ApplicationStatus.APPLIED
    appliedDate: str
    candidateName: str
    jobTitle: str
    interviewDetails: Optional[Interview] = None

    def __repr__(self):
        return f"<Application {self.candidateName} for Job #{self.jobId}>"
