"""
Profile drafts
While a profile edit is in progress the form is kept in session-scoped
storage under one key per account, and removed on save or cancel.
"""
import json
import logging
from typing import Any, Dict, Optional

from jobboard.core.storage import KeyValueStorage
from jobboard.models.account import Account
from jobboard.services.resume_parser import ParsedResume
from jobboard.services.results import OperationResult
from jobboard.services.store import DomainStore

logger = logging.getLogger(__name__)

# Text fields compared when deciding whether a draft has unsaved changes
COMPARED_FIELDS = (
    "name", "email", "location", "bio", "companyName", "companyLogo",
    "profilePic", "website", "githubUrl", "linkedinUrl", "cultureDescription",
)
LIST_FIELDS = ("skills", "teamPhotos")


def draft_key(account_id: str) -> str:
    return f"profile_draft_{account_id}"


def form_from_account(account: Account) -> Dict[str, Any]:
    """Editable form pre-filled from the account, missing values as empty"""
    form: Dict[str, Any] = {field: getattr(account, field) or "" for field in COMPARED_FIELDS}
    form["name"] = account.name
    form["email"] = account.email
    for field in LIST_FIELDS:
        form[field] = list(getattr(account, field) or [])
    return form


class ProfileDraftService:

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self, account_id: str) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(draft_key(account_id))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable profile draft for %s", account_id)
            self.discard(account_id)
            return None

    def start(self, account: Account) -> Dict[str, Any]:
        """Resume the saved draft if there is one, else a fresh form"""
        return self.load(account.id) or form_from_account(account)

    def save(self, account_id: str, form: Dict[str, Any]) -> None:
        if not form:
            return
        self.storage.set_item(draft_key(account_id), json.dumps(form))

    def discard(self, account_id: str) -> None:
        self.storage.remove_item(draft_key(account_id))

    def is_dirty(self, account: Account, form: Dict[str, Any]) -> bool:
        for field in COMPARED_FIELDS:
            if (form.get(field) or "") != (getattr(account, field) or ""):
                return True
        for field in LIST_FIELDS:
            if field in form and form[field] != list(getattr(account, field) or []):
                return True
        return False

    def commit(self, store: DomainStore, form: Dict[str, Any]) -> OperationResult:
        """Write the form to the session account and drop the draft"""
        user = store.current_user
        result = store.update_account(form)
        if result and user:
            self.discard(user.id)
        return result

    @staticmethod
    def merge_parsed_resume(form: Dict[str, Any], parsed: ParsedResume) -> Dict[str, Any]:
        return {**form, **parsed.model_dump()}
