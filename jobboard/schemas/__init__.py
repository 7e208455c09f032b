from jobboard.schemas.account import (
    SignupRequest, LoginRequest, AccountUpdate, ProfileDraft, ProfileDraftResponse
)
from jobboard.schemas.job import JobCreate, JobUpdate, JobStatusUpdate
from jobboard.schemas.application import ApplicationStatusUpdate, InterviewCreate
