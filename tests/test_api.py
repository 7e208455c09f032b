"""
Tests for the HTTP surface.

The routes are thin; these check wiring and the outcome -> status mapping.
"""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from jobboard.core.config import settings
from jobboard.core.storage import MemoryStorage
from jobboard.main import create_app
from jobboard.services.resume_parser import ParsedResume, ResumeParseError
from jobboard.services.store import DomainStore
from tests.conftest import seed_accounts

API = "/api/v1"


@pytest.fixture
def storage():
    s = MemoryStorage()
    seed_accounts(s, {"id": "e1", "email": "hr@techcorp.test", "role": "EMPLOYER",
                      "name": "TechCorp HR", "companyName": "TechCorp", "password": "pw1"})
    return s


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage=storage, session_storage=MemoryStorage())) as c:
        yield c


def _signup(client, name="Asha", email="asha@example.com", role="CANDIDATE"):
    return client.post(f"{API}/auth/signup", json={
        "name": name, "email": email, "password": "secret", "role": role
    })


def _login(client, email, password):
    return client.post(f"{API}/auth/login", json={"email": email, "password": password})


class TestService:

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_root(self, client):
        assert "jobs" in client.get("/").json()["endpoints"]


class TestAuth:

    def test_signup_and_session(self, client):
        response = _signup(client, email="Asha@Example.com")

        assert response.status_code == 201
        assert response.json()["email"] == "asha@example.com"
        assert "password" not in response.json()
        assert client.get(f"{API}/auth/session").json()["name"] == "Asha"

    def test_duplicate_signup(self, client):
        _signup(client)
        assert _signup(client, email="ASHA@example.com").status_code == 409

    def test_login_failure(self, client):
        assert _login(client, "hr@techcorp.test", "wrong").status_code == 403

    def test_admin_login(self, client):
        response = _login(client, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        assert response.json()["role"] == "ADMIN"

    def test_logout(self, client):
        _signup(client)
        assert client.post(f"{API}/auth/logout").status_code == 204
        assert client.get(f"{API}/auth/session").json() is None


class TestJobs:

    def test_public_search(self, client):
        jobs = client.get(f"{API}/jobs/", params={"q": "react"}).json()
        assert [j["id"] for j in jobs] == ["1"]

    def test_candidate_cannot_post(self, client):
        _signup(client)
        assert client.post(f"{API}/jobs/", json={"title": "x"}).status_code == 403

    def test_employer_posts_with_defaults(self, client):
        _login(client, "hr@techcorp.test", "pw1")
        response = client.post(f"{API}/jobs/", json={"title": "QA Lead", "skills": "Selenium, Pytest"})

        assert response.status_code == 201
        job = response.json()
        assert job["status"] == "ACTIVE"
        assert job["salary"] == "Competitive"
        assert job["skills"] == ["Selenium", "Pytest"]
        assert client.get(f"{API}/jobs/mine").json()[0]["id"] == job["id"]

    def test_update_not_owner(self, client):
        _signup(client, name="Other HR", email="other@hr.test", role="EMPLOYER")
        assert client.put(f"{API}/jobs/1", json={"title": "Mine now"}).status_code == 403

    def test_missing_job(self, client):
        assert client.get(f"{API}/jobs/nope").status_code == 404

    def test_delete_hides_job(self, client, storage):
        _login(client, "hr@techcorp.test", "pw1")
        assert client.delete(f"{API}/jobs/1").status_code == 204
        assert client.get(f"{API}/jobs/1").status_code == 404

        stored = json.loads(storage.get_item("jb_jobs"))
        assert next(j for j in stored if j["id"] == "1")["status"] == "DELETED"

    def test_admin_manage_and_status(self, client):
        _login(client, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        response = client.put(f"{API}/jobs/2/status", json={"status": "REJECTED"})

        assert response.json()["status"] == "REJECTED"
        assert len(client.get(f"{API}/jobs/manage").json()) == 2

    def test_null_field_ignored(self, client):
        _login(client, "hr@techcorp.test", "pw1")
        response = client.put(f"{API}/jobs/1", json={"title": None, "salary": "₹40L"})

        assert response.status_code == 200
        assert response.json()["title"] == "Senior React Developer"
        assert response.json()["salary"] == "₹40L"

    def test_manage_requires_admin(self, client):
        _login(client, "hr@techcorp.test", "pw1")
        assert client.get(f"{API}/jobs/manage").status_code == 403


class TestApplicationFlow:

    def test_full_pipeline(self, client):
        _signup(client)
        applied = client.post(f"{API}/applications/apply/1")
        assert applied.status_code == 201
        app_id = applied.json()["id"]
        assert client.post(f"{API}/applications/apply/1").status_code == 409

        client.post(f"{API}/auth/logout")
        _login(client, "hr@techcorp.test", "pw1")
        notes = client.get(f"{API}/notifications/").json()
        assert notes[0]["message"] == "New application from Asha for Senior React Developer"

        shortlisted = client.put(f"{API}/applications/{app_id}/status", json={"status": "SHORTLISTED"})
        assert shortlisted.json()["status"] == "SHORTLISTED"

        scheduled = client.post(f"{API}/applications/{app_id}/interview", json={
            "name": "Round 2", "date": "2025-06-01", "time": "10:00",
            "mode": "ONLINE", "locationLink": "https://meet.example/xyz",
        })
        body = scheduled.json()
        assert body["status"] == "INTERVIEW_SCHEDULED"
        assert body["interviewDetails"]["locationLink"] == "https://meet.example/xyz"

        assert client.get(f"{API}/dashboard/stats").json()["interviews"] == 1
        assert len(client.get(f"{API}/applications/job/1").json()) == 1

    def test_apply_to_inactive(self, client):
        _login(client, "hr@techcorp.test", "pw1")
        client.put(f"{API}/jobs/1/status", json={"status": "INACTIVE"})
        client.post(f"{API}/auth/logout")
        _signup(client)

        assert client.post(f"{API}/applications/apply/1").status_code == 400

    def test_apply_requires_session(self, client):
        assert client.post(f"{API}/applications/apply/1").status_code == 401

    def test_invalid_status_value(self, client):
        _login(client, "hr@techcorp.test", "pw1")
        response = client.put(f"{API}/applications/x/status", json={"status": "PROMOTED"})
        assert response.status_code == 422


class TestProfile:

    def test_update_profile(self, client):
        _signup(client)
        response = client.put(f"{API}/profile/", json={"bio": "Frontend", "skills": ["React"]})
        assert response.json()["skills"] == ["React"]

    def test_null_name_keeps_accounts(self, client, storage):
        _signup(client, name="Ravi", email="ravi@example.com")
        _signup(client)
        response = client.put(f"{API}/profile/", json={"name": None, "bio": "Frontend"})

        assert response.status_code == 200
        assert response.json()["name"] == "Asha"
        reloaded = DomainStore(storage)
        assert sorted(a.name for a in reloaded.accounts) == ["Asha", "Ravi", "TechCorp HR"]

    def test_draft_cycle(self, client):
        _signup(client)
        fresh = client.get(f"{API}/profile/draft").json()
        assert fresh["is_dirty"] is False

        saved = client.put(f"{API}/profile/draft", json={"location": "Pune"}).json()
        assert saved["is_dirty"] is True
        assert client.get(f"{API}/profile/draft").json()["draft"]["location"] == "Pune"

        committed = client.post(f"{API}/profile/draft/commit")
        assert committed.json()["location"] == "Pune"
        assert client.post(f"{API}/profile/draft/commit").status_code == 404

    def test_discard_draft(self, client):
        _signup(client)
        client.put(f"{API}/profile/draft", json={"bio": "tmp"})
        assert client.delete(f"{API}/profile/draft").status_code == 204
        assert client.get(f"{API}/profile/draft").json()["draft"]["bio"] == ""

    def test_resume_parse_merges_into_draft(self, client):
        _signup(client)
        parsed = ParsedResume(name="Asha Kumar", email="asha@kumar.dev",
                              skills=["React"], location="Pune", bio="Builder")
        with patch("jobboard.api.routes.profile.resume_parser.parse", return_value=parsed) as parse:
            response = client.post(f"{API}/profile/resume/parse",
                                   files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")})

        assert response.status_code == 200
        assert response.json()["draft"]["name"] == "Asha Kumar"
        assert parse.call_args[0] == (b"%PDF-1.4", "application/pdf")

    def test_resume_parse_failure(self, client):
        _signup(client)
        with patch("jobboard.api.routes.profile.resume_parser.parse",
                   side_effect=ResumeParseError("Failed to parse resume.")):
            response = client.post(f"{API}/profile/resume/parse",
                                   files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")})
        assert response.status_code == 502

    def test_reparse_stored_resume(self, client):
        _signup(client)
        client.post(f"{API}/profile/media/resumeUrl",
                    files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")})
        parsed = ParsedResume(name="Asha Kumar", skills=["Vue"])
        with patch("jobboard.api.routes.profile.resume_parser.parse", return_value=parsed) as parse:
            response = client.post(f"{API}/profile/resume/reparse")

        assert response.status_code == 200
        assert response.json()["draft"]["skills"] == ["Vue"]
        assert parse.call_args[0] == (b"%PDF-1.4", "application/pdf")

    def test_reparse_without_resume(self, client):
        _signup(client)
        assert client.post(f"{API}/profile/resume/reparse").status_code == 404

    def test_media_upload(self, client):
        _signup(client, name="Acme HR", email="hr@acme.test", role="EMPLOYER")
        logo = client.post(f"{API}/profile/media/companyLogo",
                           files={"file": ("logo.png", b"png", "image/png")}).json()
        assert logo["companyLogo"] == "data:image/png;base64,cG5n"

        client.post(f"{API}/profile/media/teamPhotos", files={"file": ("a.png", b"a", "image/png")})
        photos = client.post(f"{API}/profile/media/teamPhotos",
                             files={"file": ("b.png", b"b", "image/png")}).json()["teamPhotos"]
        assert len(photos) == 2

        remaining = client.delete(f"{API}/profile/media/teamPhotos/0").json()["teamPhotos"]
        assert remaining == [photos[1]]

    def test_unknown_media_field(self, client):
        _signup(client)
        response = client.post(f"{API}/profile/media/password",
                               files={"file": ("x.txt", b"x", "text/plain")})
        assert response.status_code == 400

    def test_public_company_page(self, client):
        page = client.get(f"{API}/profile/e1").json()
        assert page["account"]["companyName"] == "TechCorp"
        assert "password" not in page["account"]
        assert [j["id"] for j in page["jobs"]] == ["1"]
