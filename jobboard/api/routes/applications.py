"""
Application API Endpoints
Candidates apply; job owners and admins move applications along
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from jobboard.api.deps import current_account, get_store, require_role, unwrap
from jobboard.models.account import UserRole
from jobboard.models.application import Application
from jobboard.schemas.application import ApplicationStatusUpdate, InterviewCreate
from jobboard.services import listings
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("/apply/{job_id}", response_model=Application, status_code=status.HTTP_201_CREATED)
def apply(job_id: str, store: DomainStore = Depends(get_store)):
    """Apply to an active job; 409 on a second attempt"""
    current_account(store)
    return unwrap(store.apply_to_job(job_id))


@router.get("/mine", response_model=List[Application])
def my_applications(store: DomainStore = Depends(get_store)):
    user = current_account(store)
    return listings.applications_for_candidate(store.applications, user.id)


@router.get("/employer", response_model=List[Application])
def employer_applications(store: DomainStore = Depends(get_store)):
    """Applications to every non-deleted job of the session employer"""
    user = require_role(store, UserRole.EMPLOYER, UserRole.ADMIN)
    return listings.applications_for_employer(store.applications, store.jobs, user.id)


@router.get("/job/{job_id}", response_model=List[Application])
def job_applications(job_id: str, store: DomainStore = Depends(get_store)):
    current_account(store)
    job = store.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    if not store.is_owner_or_admin(job):
        raise HTTPException(status_code=403, detail="Not the owner of this job")
    return listings.applications_for_job(store.applications, job_id)


@router.get("/{application_id}", response_model=Application)
def get_application(application_id: str, store: DomainStore = Depends(get_store)):
    user = current_account(store)
    application = store.get_application(application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    job = store.get_job(application.jobId)
    if application.candidateId != user.id and not (job and store.is_owner_or_admin(job)):
        raise HTTPException(status_code=403, detail="Not allowed to view this application")
    return application


@router.put("/{application_id}/status", response_model=Application)
def update_application_status(
    application_id: str,
    data: ApplicationStatusUpdate,
    store: DomainStore = Depends(get_store)
):
    current_account(store)
    return unwrap(store.set_application_status(application_id, data.status))


@router.post("/{application_id}/interview", response_model=Application)
def schedule_interview(
    application_id: str,
    interview: InterviewCreate,
    store: DomainStore = Depends(get_store)
):
    """Attach interview details; rescheduling overwrites them"""
    current_account(store)
    return unwrap(store.schedule_interview(application_id, interview))
