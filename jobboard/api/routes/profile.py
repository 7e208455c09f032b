"""
Profile API Endpoints
Profile edits, in-progress drafts, resume parsing and media uploads
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from typing import Dict

from jobboard.api.deps import current_account, get_drafts, get_store, unwrap
from jobboard.models.account import Account, UserRole
from jobboard.schemas.account import AccountUpdate, ProfileDraft, ProfileDraftResponse
from jobboard.services import listings
from jobboard.services.file_ingest import decode_data_url, read_upload, to_data_url
from jobboard.services.profile_drafts import ProfileDraftService
from jobboard.services.resume_parser import ResumeParseError, resume_parser
from jobboard.services.store import DomainStore

router = APIRouter(prefix="/profile", tags=["Profile"])

# Upload targets that replace a single data-URL field
MEDIA_FIELDS = {"profilePic", "companyLogo", "resumeUrl"}


@router.put("/", response_model=Account)
def update_profile(data: AccountUpdate, store: DomainStore = Depends(get_store)):
    current_account(store)
    return unwrap(store.update_account(data.model_dump(exclude_unset=True, exclude_none=True)))


# ============== DRAFTS ==============

@router.get("/draft", response_model=ProfileDraftResponse)
def get_draft(
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    """Saved draft if an edit is in progress, else a form built from the account"""
    user = current_account(store)
    draft = drafts.start(user)
    return ProfileDraftResponse(draft=draft, is_dirty=drafts.is_dirty(user, draft))


@router.put("/draft", response_model=ProfileDraftResponse)
def save_draft(
    form: ProfileDraft,
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    user = current_account(store)
    draft = {**drafts.start(user), **form.model_dump(exclude_unset=True)}
    drafts.save(user.id, draft)
    return ProfileDraftResponse(draft=draft, is_dirty=drafts.is_dirty(user, draft))


@router.post("/draft/commit", response_model=Account)
def commit_draft(
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    user = current_account(store)
    draft = drafts.load(user.id)
    if draft is None:
        raise HTTPException(status_code=404, detail="No profile draft in progress")
    return unwrap(drafts.commit(store, draft))


@router.delete("/draft", status_code=status.HTTP_204_NO_CONTENT)
def discard_draft(
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    user = current_account(store)
    drafts.discard(user.id)
    return None


# ============== UPLOADS ==============

@router.post("/resume/parse", response_model=ProfileDraftResponse)
async def parse_resume(
    file: UploadFile = File(...),
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    """
    Run the AI parser over a resume and merge the result into the draft
    Starts an edit if none is in progress
    """
    user = current_account(store)
    content, mime_type = await read_upload(file)
    return _parse_into_draft(user, content, mime_type, drafts)


@router.post("/resume/reparse", response_model=ProfileDraftResponse)
def reparse_stored_resume(
    store: DomainStore = Depends(get_store),
    drafts: ProfileDraftService = Depends(get_drafts)
):
    """Run the parser again over the resume already saved on the account"""
    user = current_account(store)
    if not user.resumeUrl:
        raise HTTPException(status_code=404, detail="No resume on this account")
    try:
        mime_type, content = decode_data_url(user.resumeUrl)
    except ValueError:
        raise HTTPException(status_code=400, detail="Stored resume is not a readable data URL")
    return _parse_into_draft(user, content, mime_type, drafts)


def _parse_into_draft(
    user: Account, content: bytes, mime_type: str, drafts: ProfileDraftService
) -> ProfileDraftResponse:
    try:
        parsed = resume_parser.parse(content, mime_type)
    except ResumeParseError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    draft = drafts.merge_parsed_resume(drafts.start(user), parsed)
    drafts.save(user.id, draft)
    return ProfileDraftResponse(draft=draft, is_dirty=drafts.is_dirty(user, draft))


@router.post("/media/{field}", response_model=Account)
async def upload_media(
    field: str,
    file: UploadFile = File(...),
    store: DomainStore = Depends(get_store)
):
    """Store an uploaded image or resume on the account as a data URL"""
    user = current_account(store)
    if field not in MEDIA_FIELDS and field != "teamPhotos":
        raise HTTPException(status_code=400, detail=f"Unknown media field: {field}")

    content, mime_type = await read_upload(file)
    data_url = to_data_url(content, mime_type)
    if field == "teamPhotos":
        return unwrap(store.update_account({"teamPhotos": [*(user.teamPhotos or []), data_url]}))
    return unwrap(store.update_account({field: data_url}))


@router.delete("/media/teamPhotos/{index}", response_model=Account)
def remove_team_photo(index: int, store: DomainStore = Depends(get_store)):
    user = current_account(store)
    photos = list(user.teamPhotos or [])
    if index < 0 or index >= len(photos):
        raise HTTPException(status_code=404, detail="Photo not found")
    return unwrap(store.update_account({"teamPhotos": photos[:index] + photos[index + 1:]}))


# ============== PUBLIC PROFILES ==============

@router.get("/{account_id}", response_model=Dict)
def view_profile(account_id: str, store: DomainStore = Depends(get_store)):
    """
    Candidate profile or company branding page
    Includes the candidate's applications or the company's active jobs
    """
    account = store.get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    result = {"account": account.model_dump(mode="json")}
    if account.role == UserRole.CANDIDATE:
        result["applications"] = [
            a.model_dump(mode="json")
            for a in listings.applications_for_candidate(store.applications, account_id)
        ]
    else:
        result["jobs"] = [
            j.model_dump(mode="json")
            for j in listings.company_active_jobs(store.jobs, account_id)
        ]
    return result
