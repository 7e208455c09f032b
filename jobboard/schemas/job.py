"""
Pydantic schemas for Job API
"""
from pydantic import BaseModel, field_validator
from typing import Optional, List, Union
from jobboard.models.job import JobStatus


def _split_skills(v):
    """Accept a comma separated string as well as a list"""
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    return v


class JobCreate(BaseModel):
    """Unset fields fall back to the store defaults"""
    title: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    skills: Optional[Union[str, List[str]]] = None
    description: Optional[str] = None
    type: Optional[str] = None

    @field_validator('skills', mode='before')
    @classmethod
    def convert_skills(cls, v):
        return _split_skills(v)


class JobUpdate(JobCreate):
    status: Optional[JobStatus] = None
    companyName: Optional[str] = None
    companyLogo: Optional[str] = None


class JobStatusUpdate(BaseModel):
    status: JobStatus
