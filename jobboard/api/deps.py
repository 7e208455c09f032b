"""
Shared route dependencies
The store and the draft service live on app.state, created at startup
"""
from fastapi import HTTPException, Request, status

from jobboard.models.account import Account, UserRole
from jobboard.services.profile_drafts import ProfileDraftService
from jobboard.services.results import OperationResult, Outcome
from jobboard.services.store import DomainStore

OUTCOME_STATUS = {
    Outcome.DENIED: status.HTTP_403_FORBIDDEN,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.CONFLICT: status.HTTP_409_CONFLICT,
    Outcome.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
}


def get_store(request: Request) -> DomainStore:
    return request.app.state.store


def get_drafts(request: Request) -> ProfileDraftService:
    return request.app.state.drafts


def current_account(store: DomainStore) -> Account:
    """Session account or 401"""
    if not store.current_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return store.current_user


def require_role(store: DomainStore, *roles: UserRole) -> Account:
    user = current_account(store)
    if user.role not in roles:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed for this role")
    return user


def unwrap(result: OperationResult):
    """Return the affected entity or raise the matching HTTP error"""
    if not result:
        raise HTTPException(status_code=OUTCOME_STATUS[result.outcome], detail=result.reason)
    return result.entity
