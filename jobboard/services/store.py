"""
Domain Store
Holds accounts, jobs, applications and notifications plus the session
account. Every successful mutation rewrites the affected collections to
key-value storage; every refusal returns a tagged result and changes nothing.
"""
import json
import logging
import random
import string
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from jobboard.core.config import settings
from jobboard.core.storage import KeyValueStorage
from jobboard.models.account import PROFILE_FIELDS, Account, StoredAccount, UserRole
from jobboard.models.application import (
    Application, ApplicationStatus, Interview, InterviewMode
)
from jobboard.models.job import Job, JobStatus
from jobboard.models.notification import Notification
from jobboard.services.results import OperationResult

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits

# Storage key suffixes, prefixed with settings.STORAGE_KEY_PREFIX
ACCOUNTS_KEY = "all_users"
SESSION_KEY = "user"
JOBS_KEY = "jobs"
APPLICATIONS_KEY = "apps"
NOTIFICATIONS_KEY = "notifs"

# Fields an owner or admin may change on a posting
JOB_EDITABLE_FIELDS = (
    "title", "location", "salary", "skills", "description", "type",
    "status", "companyName", "companyLogo",
)

Payload = Union[Mapping[str, Any], BaseModel]


def generate_id() -> str:
    """Short opaque id; not suitable for anything security related"""
    return "".join(random.choices(_ID_ALPHABET, k=9))


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_dict(data: Optional[Payload]) -> Dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data)


def demo_jobs(now: str) -> List[Job]:
    """Postings a fresh store starts with"""
    return [
        Job(
            id="1",
            employerId="e1",
            companyName="TechCorp",
            title="Senior React Developer",
            location="Remote, India",
            salary="₹20L - ₹30L",
            skills=["React", "TypeScript", "Tailwind"],
            description="Expert React dev needed for exciting new project.",
            postedAt=now,
            updatedAt=now,
            type="Full-time",
            status=JobStatus.ACTIVE,
        ),
        Job(
            id="2",
            employerId="e2",
            companyName="FinStream",
            title="Backend Engineer",
            location="Bangalore, KA",
            salary="₹15L - ₹25L",
            skills=["Node.js", "PostgreSQL"],
            description="Join our fintech backend team.",
            postedAt=now,
            updatedAt=now,
            type="Full-time",
            status=JobStatus.ACTIVE,
        ),
    ]


class DomainStore:
    """
    Single owned state container for the job board.

    Reads go through the collection properties; writes go through the
    operation methods only. Collections are read from storage once at
    construction (or on reload()) and each affected key is overwritten
    wholesale after a successful mutation.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key_prefix: Optional[str] = None,
        admin_email: Optional[str] = None,
        admin_password: Optional[str] = None,
        admin_name: Optional[str] = None,
        admin_id: Optional[str] = None,
        seed_demo_jobs: Optional[bool] = None,
        clock: Callable[[], str] = utc_now,
    ):
        self.storage = storage
        self.key_prefix = settings.STORAGE_KEY_PREFIX if key_prefix is None else key_prefix
        self.admin_email = admin_email or settings.ADMIN_EMAIL
        self.admin_password = admin_password or settings.ADMIN_PASSWORD
        self.admin_name = admin_name or settings.ADMIN_NAME
        self.admin_id = admin_id or settings.ADMIN_ID
        self.seed_demo_jobs = settings.SEED_DEMO_JOBS if seed_demo_jobs is None else seed_demo_jobs
        self._clock = clock

        self._accounts: List[StoredAccount] = []
        self._current_user: Optional[Account] = None
        self._jobs: List[Job] = []
        self._applications: List[Application] = []
        self._notifications: List[Notification] = []
        self.reload()

    # ============== PERSISTENCE ==============

    def storage_key(self, name: str) -> str:
        return f"{self.key_prefix}{name}"

    def _load(self, name: str):
        raw = self.storage.get_item(self.storage_key(name))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable storage key %s", self.storage_key(name))
            return None

    def _load_list(self, name: str, model, default: List) -> List:
        """Malformed records are skipped one by one; the rest of the collection survives"""
        data = self._load(name)
        if data is None:
            return default
        if not isinstance(data, list):
            logger.warning("Ignoring malformed collection %s", self.storage_key(name))
            return default

        items = []
        for index, item in enumerate(data):
            try:
                items.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed record %d in %s: %s", index, self.storage_key(name), e)
        return items

    def reload(self) -> None:
        """Re-read every collection from storage, as a page refresh would"""
        self._accounts = self._load_list(ACCOUNTS_KEY, StoredAccount, [])
        self._jobs = self._load_list(
            JOBS_KEY, Job, demo_jobs(self._clock()) if self.seed_demo_jobs else []
        )
        self._applications = self._load_list(APPLICATIONS_KEY, Application, [])
        self._notifications = self._load_list(NOTIFICATIONS_KEY, Notification, [])

        session = self._load(SESSION_KEY)
        try:
            self._current_user = Account.model_validate(session) if session else None
        except ValidationError as e:
            logger.warning("Ignoring malformed session: %s", e)
            self._current_user = None

    def _write(self, name: str, value: Any) -> None:
        self.storage.set_item(self.storage_key(name), json.dumps(value))

    def _persist_accounts(self) -> None:
        self._write(ACCOUNTS_KEY, [a.model_dump(mode="json") for a in self._accounts])

    def _persist_session(self) -> None:
        user = self._current_user
        self._write(SESSION_KEY, user.model_dump(mode="json") if user else None)

    def _persist_jobs(self) -> None:
        self._write(JOBS_KEY, [j.model_dump(mode="json") for j in self._jobs])

    def _persist_applications(self) -> None:
        self._write(APPLICATIONS_KEY, [a.model_dump(mode="json") for a in self._applications])

    def _persist_notifications(self) -> None:
        self._write(NOTIFICATIONS_KEY, [n.model_dump(mode="json") for n in self._notifications])

    def _refuse(self, operation: str, result: OperationResult) -> OperationResult:
        logger.info("%s refused (%s): %s", operation, result.outcome.value, result.reason)
        return result

    # ============== READS ==============

    @property
    def current_user(self) -> Optional[Account]:
        return self._current_user

    @property
    def accounts(self) -> List[Account]:
        """Registered accounts without credentials"""
        return [a.to_session() for a in self._accounts]

    @property
    def jobs(self) -> List[Job]:
        return list(self._jobs)

    @property
    def applications(self) -> List[Application]:
        return list(self._applications)

    @property
    def notifications(self) -> List[Notification]:
        return list(self._notifications)

    def get_job(self, job_id: str) -> Optional[Job]:
        return next((j for j in self._jobs if j.id == job_id), None)

    def get_application(self, application_id: str) -> Optional[Application]:
        return next((a for a in self._applications if a.id == application_id), None)

    def get_account(self, account_id: str) -> Optional[Account]:
        found = next((a for a in self._accounts if a.id == account_id), None)
        return found.to_session() if found else None

    def is_owner_or_admin(self, job: Job) -> bool:
        user = self._current_user
        if not user:
            return False
        return user.role == UserRole.ADMIN or job.employerId == user.id

    # ============== ACCOUNTS & SESSION ==============

    def register(self, name: str, email: str, password: str, role: UserRole) -> OperationResult:
        """Create an account and log it in; refused if the email is taken"""
        email_key = email.lower()
        if any(a.email.lower() == email_key for a in self._accounts):
            return self._refuse("register", OperationResult.conflict("Email already registered"))

        stored = StoredAccount(
            id=generate_id(),
            email=email_key,
            role=UserRole(role),
            name=name,
            password=password,
        )
        self._accounts = [*self._accounts, stored]
        self._current_user = stored.to_session()
        self._persist_accounts()
        self._persist_session()
        logger.debug("Registered account %s as %s", stored.id, stored.role.value)
        return OperationResult.success(self._current_user)

    def authenticate(self, email: str, password: str) -> OperationResult:
        """
        Log in. The configured super-admin pair is checked first and yields
        a synthetic admin that is not in the accounts collection.
        """
        if email == self.admin_email and password == self.admin_password:
            self._current_user = Account(
                id=self.admin_id,
                email=email,
                role=UserRole.ADMIN,
                name=self.admin_name,
            )
            self._persist_session()
            return OperationResult.success(self._current_user)

        email_key = email.lower()
        found = next(
            (a for a in self._accounts if a.email.lower() == email_key and a.password == password),
            None,
        )
        if not found:
            return self._refuse("authenticate", OperationResult.denied("Invalid email or password"))

        self._current_user = found.to_session()
        self._persist_session()
        return OperationResult.success(self._current_user)

    def end_session(self) -> OperationResult:
        self._current_user = None
        self._persist_session()
        return OperationResult.success()

    def update_account(self, data: Payload) -> OperationResult:
        """Merge profile fields into the session account and its stored record"""
        user = self._current_user
        if not user:
            return self._refuse("update_account", OperationResult.denied("No session"))

        changes = {k: v for k, v in _as_dict(data).items() if k in PROFILE_FIELDS}
        try:
            session = Account.model_validate({**user.model_dump(), **changes})
            accounts = [
                StoredAccount.model_validate({**a.model_dump(), **changes}) if a.id == user.id else a
                for a in self._accounts
            ]
        except ValidationError as e:
            return self._refuse("update_account", OperationResult.invalid_state(f"Invalid profile: {e}"))

        self._current_user = session
        self._accounts = accounts
        self._persist_session()
        self._persist_accounts()
        return OperationResult.success(self._current_user)

    # ============== JOB POSTINGS ==============

    def create_job_posting(self, data: Payload) -> OperationResult:
        """New postings go straight to ACTIVE, newest first"""
        user = self._current_user
        if not user:
            return self._refuse("create_job_posting", OperationResult.denied("No session"))
        if user.role == UserRole.CANDIDATE:
            return self._refuse("create_job_posting", OperationResult.denied("Candidates cannot post jobs"))

        fields = _as_dict(data)
        now = self._clock()
        job = Job(
            id=generate_id(),
            employerId=user.id,
            companyName=user.companyName or user.name or "Anonymous Company",
            companyLogo=user.companyLogo,
            title=fields.get("title") or "",
            location=fields.get("location") or "Remote",
            salary=fields.get("salary") or "Competitive",
            skills=list(fields.get("skills") or []),
            description=fields.get("description") or "",
            postedAt=now,
            updatedAt=now,
            type=fields.get("type") or "Full-time",
            status=JobStatus.ACTIVE,
        )
        self._jobs = [job, *self._jobs]
        self._persist_jobs()
        logger.debug("Job %s posted by %s", job.id, user.id)
        return OperationResult.success(job)

    def _guard_job(self, operation: str, job_id: str):
        job = self.get_job(job_id)
        if not job:
            return None, self._refuse(operation, OperationResult.not_found(f"Job {job_id} not found"))
        if not self.is_owner_or_admin(job):
            return None, self._refuse(operation, OperationResult.denied("Not the owner of this job"))
        return job, None

    def _replace_job(self, updated: Job) -> None:
        self._jobs = [updated if j.id == updated.id else j for j in self._jobs]

    def update_job_posting(self, job_id: str, data: Payload) -> OperationResult:
        job, refusal = self._guard_job("update_job_posting", job_id)
        if refusal:
            return refusal

        changes = {k: v for k, v in _as_dict(data).items() if k in JOB_EDITABLE_FIELDS}
        try:
            updated = Job.model_validate({
                **job.model_dump(),
                **changes,
                "updatedAt": self._clock(),
            })
        except ValidationError as e:
            return self._refuse("update_job_posting", OperationResult.invalid_state(f"Invalid job: {e}"))
        self._replace_job(updated)
        self._persist_jobs()

        if changes.get("status") and self._current_user.role == UserRole.ADMIN:
            new_status = JobStatus(changes["status"])
            self.notify(job.employerId, f'Your job "{job.title}" is now {new_status.value.lower()}.')

        return OperationResult.success(updated)

    def soft_delete_job_posting(self, job_id: str) -> OperationResult:
        """Flip status to DELETED; the record stays in storage"""
        job, refusal = self._guard_job("soft_delete_job_posting", job_id)
        if refusal:
            return refusal

        updated = job.model_copy(update={"status": JobStatus.DELETED, "updatedAt": self._clock()})
        self._replace_job(updated)
        self._persist_jobs()
        return OperationResult.success(updated)

    # ============== APPLICATIONS ==============

    def apply_to_job(self, job_id: str) -> OperationResult:
        user = self._current_user
        if not user or user.role != UserRole.CANDIDATE:
            return self._refuse("apply_to_job", OperationResult.denied("Only candidates can apply"))

        job = self.get_job(job_id)
        if not job:
            return self._refuse("apply_to_job", OperationResult.not_found(f"Job {job_id} not found"))
        if job.status != JobStatus.ACTIVE:
            return self._refuse(
                "apply_to_job",
                OperationResult.invalid_state(f"Job {job_id} is {job.status.value}"),
            )
        if any(a.jobId == job_id and a.candidateId == user.id for a in self._applications):
            return self._refuse("apply_to_job", OperationResult.conflict("Already applied"))

        application = Application(
            id=generate_id(),
            jobId=job_id,
            candidateId=user.id,
            status=ApplicationStatus.APPLIED,
            appliedDate=self._clock(),
            candidateName=user.name,
            jobTitle=job.title,
        )
        self._applications = [*self._applications, application]
        self._persist_applications()
        self.notify(job.employerId, f"New application from {user.name} for {job.title}")
        return OperationResult.success(application)

    def _guard_application(self, operation: str, application_id: str):
        application = self.get_application(application_id)
        if not application:
            return None, self._refuse(
                operation, OperationResult.not_found(f"Application {application_id} not found")
            )
        job = self.get_job(application.jobId)
        if not job:
            return None, self._refuse(
                operation, OperationResult.not_found(f"Job {application.jobId} not found")
            )
        if not self.is_owner_or_admin(job):
            return None, self._refuse(operation, OperationResult.denied("Not the owner of this job"))
        return application, None

    def _replace_application(self, updated: Application) -> None:
        self._applications = [updated if a.id == updated.id else a for a in self._applications]

    def set_application_status(self, application_id: str, status: ApplicationStatus) -> OperationResult:
        application, refusal = self._guard_application("set_application_status", application_id)
        if refusal:
            return refusal

        status = ApplicationStatus(status)
        updated = application.model_copy(update={"status": status})
        self._replace_application(updated)
        self._persist_applications()
        self.notify(
            application.candidateId,
            f"Your application status for {application.jobTitle} changed to {status.label}",
        )
        return OperationResult.success(updated)

    def schedule_interview(self, application_id: str, interview: Payload) -> OperationResult:
        """Attach (or overwrite) the interview and move to INTERVIEW_SCHEDULED"""
        application, refusal = self._guard_application("schedule_interview", application_id)
        if refusal:
            return refusal

        details = _as_dict(interview)
        details["applicationId"] = application.id
        details["id"] = details.get("id") or generate_id()
        record = Interview.model_validate(details)

        updated = application.model_copy(update={
            "status": ApplicationStatus.INTERVIEW_SCHEDULED,
            "interviewDetails": record,
        })
        self._replace_application(updated)
        self._persist_applications()
        self.notify(
            application.candidateId,
            f"Your interview for {application.jobTitle} is scheduled on "
            f"{record.date} at {record.time} via {InterviewMode(record.mode).value}",
        )
        return OperationResult.success(updated)

    # ============== NOTIFICATIONS ==============

    def notify(self, user_id: str, message: str) -> OperationResult:
        """Prepend an unread notification"""
        notification = Notification(
            id=generate_id(),
            userId=user_id,
            message=message,
            read=False,
            createdAt=self._clock(),
        )
        self._notifications = [notification, *self._notifications]
        self._persist_notifications()
        return OperationResult.success(notification)
