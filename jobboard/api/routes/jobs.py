"""
Job Posting API Endpoints
Public search plus employer/admin management
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from jobboard.api.deps import get_store, require_role, unwrap
from jobboard.models.account import UserRole
from jobboard.models.job import Job, JobStatus
from jobboard.schemas.job import JobCreate, JobStatusUpdate, JobUpdate
from jobboard.services import listings
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/jobs", tags=["Jobs"])


# ============== PUBLIC ENDPOINTS ==============

@router.get("/", response_model=List[Job])
def search_jobs(q: str = "", location: str = "", store: DomainStore = Depends(get_store)):
    """
    Active jobs for the home page
    ``q`` matches title or any skill, ``location`` matches the location
    """
    return listings.search_jobs(store.jobs, q, location)


@router.get("/company/{employer_id}", response_model=List[Job])
def company_jobs(employer_id: str, store: DomainStore = Depends(get_store)):
    """Active jobs shown on an employer's branding page"""
    return listings.company_active_jobs(store.jobs, employer_id)


# ============== EMPLOYER / ADMIN ENDPOINTS ==============

@router.get("/mine", response_model=List[Job])
def my_jobs(store: DomainStore = Depends(get_store)):
    user = require_role(store, UserRole.EMPLOYER, UserRole.ADMIN)
    return listings.employer_jobs(store.jobs, user.id)


@router.get("/manage", response_model=List[Job])
def manage_jobs(q: str = "", store: DomainStore = Depends(get_store)):
    """Admin table: every job that is not deleted"""
    require_role(store, UserRole.ADMIN)
    return listings.manageable_jobs(store.jobs, q)


@router.get("/{job_id}", response_model=Job)
def get_job(job_id: str, store: DomainStore = Depends(get_store)):
    job = store.get_job(job_id)
    if not job or job.status == JobStatus.DELETED:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/", response_model=Job, status_code=status.HTTP_201_CREATED)
def create_job(job_data: JobCreate, store: DomainStore = Depends(get_store)):
    return unwrap(store.create_job_posting(job_data))


@router.put("/{job_id}", response_model=Job)
def update_job(job_id: str, job_data: JobUpdate, store: DomainStore = Depends(get_store)):
    return unwrap(store.update_job_posting(job_id, job_data.model_dump(exclude_unset=True, exclude_none=True)))


@router.put("/{job_id}/status", response_model=Job)
def set_job_status(job_id: str, data: JobStatusUpdate, store: DomainStore = Depends(get_store)):
    """Toggle active/inactive, or approve/reject as admin"""
    return unwrap(store.update_job_posting(job_id, {"status": data.status}))


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: str, store: DomainStore = Depends(get_store)):
    """Soft delete; the record stays in storage"""
    unwrap(store.soft_delete_job_posting(job_id))
    return None
