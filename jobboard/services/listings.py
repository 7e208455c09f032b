"""
Read-side queries used by the search page and the dashboards.
Everything here is a pure function over collections read from the store.
"""
from typing import Dict, Iterable, List

from jobboard.models.account import Account
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job, JobStatus
from jobboard.models.notification import Notification


def active_jobs(jobs: Iterable[Job]) -> List[Job]:
    return [j for j in jobs if j.status == JobStatus.ACTIVE]


def search_jobs(jobs: Iterable[Job], term: str = "", location: str = "") -> List[Job]:
    """
    Active jobs whose title or any skill contains ``term`` and whose
    location contains ``location``. Both matches are case-insensitive
    and an empty string matches everything.
    """
    term = (term or "").lower()
    location = (location or "").lower()
    return [
        j for j in active_jobs(jobs)
        if (term in j.title.lower() or any(term in s.lower() for s in j.skills))
        and location in j.location.lower()
    ]


def manageable_jobs(jobs: Iterable[Job], term: str = "") -> List[Job]:
    """Admin table: everything not deleted, filtered on title or company"""
    term = (term or "").lower()
    return [
        j for j in jobs
        if j.status != JobStatus.DELETED
        and (term in j.title.lower() or term in j.companyName.lower())
    ]


def employer_jobs(jobs: Iterable[Job], employer_id: str) -> List[Job]:
    return [j for j in jobs if j.employerId == employer_id and j.status != JobStatus.DELETED]


def company_active_jobs(jobs: Iterable[Job], employer_id: str) -> List[Job]:
    return [j for j in jobs if j.employerId == employer_id and j.status == JobStatus.ACTIVE]


def applications_for_candidate(applications: Iterable[Application], candidate_id: str) -> List[Application]:
    return [a for a in applications if a.candidateId == candidate_id]


def applications_for_job(applications: Iterable[Application], job_id: str) -> List[Application]:
    return [a for a in applications if a.jobId == job_id]


def applications_for_employer(
    applications: Iterable[Application],
    jobs: Iterable[Job],
    employer_id: str,
) -> List[Application]:
    job_ids = {j.id for j in employer_jobs(jobs, employer_id)}
    return [a for a in applications if a.jobId in job_ids]


def notifications_for(notifications: Iterable[Notification], user_id: str) -> List[Notification]:
    return [n for n in notifications if n.userId == user_id]


def _count_status(applications: List[Application], status: ApplicationStatus) -> int:
    return sum(1 for a in applications if a.status == status)


def candidate_stats(applications: Iterable[Application], candidate_id: str) -> Dict[str, int]:
    mine = applications_for_candidate(applications, candidate_id)
    return {
        "applied": len(mine),
        "interviews": _count_status(mine, ApplicationStatus.INTERVIEW_SCHEDULED),
        "hired": _count_status(mine, ApplicationStatus.HIRED),
        "rejected": _count_status(mine, ApplicationStatus.REJECTED),
    }


def employer_stats(
    applications: Iterable[Application],
    jobs: Iterable[Job],
    employer_id: str,
) -> Dict[str, int]:
    jobs = list(jobs)
    own_jobs = employer_jobs(jobs, employer_id)
    relevant = applications_for_employer(applications, jobs, employer_id)
    return {
        "jobs": len(own_jobs),
        "active_jobs": sum(1 for j in own_jobs if j.status == JobStatus.ACTIVE),
        "applications": len(relevant),
        "interviews": _count_status(relevant, ApplicationStatus.INTERVIEW_SCHEDULED),
    }


def admin_stats(
    accounts: Iterable[Account],
    jobs: Iterable[Job],
    applications: Iterable[Application],
) -> Dict[str, int]:
    visible = manageable_jobs(jobs)
    return {
        "users": len(list(accounts)),
        "active_jobs": sum(1 for j in visible if j.status == JobStatus.ACTIVE),
        "pending_approval": sum(1 for j in visible if j.status == JobStatus.PENDING),
        "applications": len(list(applications)),
    }
