from fastapi import APIRouter
from jobboard.api.routes import auth, profile, jobs, applications, notifications, dashboard

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(profile.router)
api_router.include_router(jobs.router)
api_router.include_router(applications.router)
api_router.include_router(notifications.router)
api_router.include_router(dashboard.router)
