"""
JobBoard
========
Candidates browse and apply to postings, employers post jobs and manage
their pipelines, admins moderate listings.

Flow:
1. Users sign up as candidate or employer (admins log in with the override credential)
2. Employers post jobs, which go live immediately
3. Candidates search active jobs and apply
4. Employers shortlist, reject, schedule interviews and hire
5. Every step notifies the other side
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional

from jobboard import __version__
from jobboard.api import api_router
from jobboard.core.config import settings
from jobboard.core.logging import setup_logging
from jobboard.core.storage import KeyValueStorage, MemoryStorage, create_storage
from jobboard.services.profile_drafts import ProfileDraftService
from jobboard.services.store import DomainStore


def create_app(
    storage: Optional[KeyValueStorage] = None,
    session_storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """
    Build the application around one store
    ``storage`` holds the collections, ``session_storage`` the profile drafts
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"🚀 Starting {settings.APP_NAME}...")
        setup_logging()
        app.state.store = DomainStore(storage if storage is not None else create_storage())
        app.state.drafts = ProfileDraftService(
            session_storage if session_storage is not None else MemoryStorage()
        )
        print("✅ Store loaded")
        yield
        print("👋 Shutting down...")

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
## JobBoard API

### Features:
- **Accounts**: Candidate, employer and admin roles with a single session
- **Jobs**: Post, edit, pause and soft-delete listings; public search
- **Applications**: Apply once per job, move through the hiring pipeline
- **Interviews**: Attach round, date, time and mode to an application
- **Notifications**: Addressed messages for every pipeline change
- **Profiles**: Drafted edits, AI resume parsing, media uploads
        """,
        version=__version__,
        lifespan=lifespan
    )

    # CORS middleware for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": settings.APP_NAME}

    @app.get("/")
    def root():
        """Root endpoint with API info"""
        return {
            "service": settings.APP_NAME,
            "version": __version__,
            "docs": "/docs",
            "endpoints": {
                "auth": "/api/v1/auth",
                "profile": "/api/v1/profile",
                "jobs": "/api/v1/jobs",
                "applications": "/api/v1/applications",
                "notifications": "/api/v1/notifications",
                "dashboard": "/api/v1/dashboard/stats"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("jobboard.main:app", host="0.0.0.0", port=8000, reload=True)
