"""
Pydantic schemas for Application API
"""
from pydantic import BaseModel
from typing import Optional
from jobboard.models.application import ApplicationStatus, InterviewMode


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class InterviewCreate(BaseModel):
    """Scheduling details; rescheduling overwrites the previous record"""
    name: str = ""  # Round name, e.g. "Technical Round"
    date: str
    time: str
    mode: InterviewMode = InterviewMode.ONLINE
    locationLink: str = ""
    notes: str = ""
    id: Optional[str] = None
