"""
Signup / login / logout
The session is the store's current account; there is no token
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_store, unwrap
from jobboard.models.account import Account
from jobboard.schemas.account import LoginRequest, SignupRequest
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=Account, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, store: DomainStore = Depends(get_store)):
    """Register and log in; 409 when the email is already taken"""
    return unwrap(store.register(data.name, data.email, data.password, data.role))


@router.post("/login", response_model=Account)
def login(data: LoginRequest, store: DomainStore = Depends(get_store)):
    return unwrap(store.authenticate(data.email, data.password))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(store: DomainStore = Depends(get_store)):
    store.end_session()
    return None


@router.get("/session", response_model=Optional[Account])
def session(store: DomainStore = Depends(get_store)):
    """Current session account, or null when logged out"""
    return store.current_user
