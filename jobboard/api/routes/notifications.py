"""
Notification API Endpoints
"""
from fastapi import APIRouter, Depends
from typing import List

from jobboard.api.deps import current_account, get_store
from jobboard.models.notification import Notification
from jobboard.services import listings
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/", response_model=List[Notification])
def my_notifications(store: DomainStore = Depends(get_store)):
    """Newest first"""
    user = current_account(store)
    return listings.notifications_for(store.notifications, user.id)
