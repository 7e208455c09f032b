"""
Dashboard counters for each role
"""
from fastapi import APIRouter, Depends
from typing import Dict

from jobboard.api.deps import current_account, get_store
from jobboard.models.account import UserRole
from jobboard.services import listings
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=Dict[str, int])
def dashboard_stats(store: DomainStore = Depends(get_store)):
    user = current_account(store)
    if user.role == UserRole.ADMIN:
        return listings.admin_stats(store.accounts, store.jobs, store.applications)
    if user.role == UserRole.EMPLOYER:
        return listings.employer_stats(store.applications, store.jobs, user.id)
    return listings.candidate_stats(store.applications, user.id)
