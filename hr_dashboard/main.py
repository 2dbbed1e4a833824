import logging
from typing import Optional

from fastapi import FastAPI

from hr_dashboard.api.achievements import router as achievements_router
from hr_dashboard.api.candidates import router as candidates_router
from hr_dashboard.api.interviews import router as interviews_router
from hr_dashboard.api.job_descriptions import router as job_descriptions_router
from hr_dashboard.api.leaves import router as leaves_router
from hr_dashboard.core.collaborator import HttpRecordCollaborator, RecordCollaborator
from hr_dashboard.core.config import settings
from hr_dashboard.core.errors import LoadFailure
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(collaborator: Optional[RecordCollaborator] = None) -> FastAPI:
    app = FastAPI(
        title="HR Dashboard Service",
        version="0.1.0",
        description="Candidate / leave / interview / achievement / job description list views (REST + backend collaborator)",
    )

    app.include_router(candidates_router)
    app.include_router(leaves_router)
    app.include_router(interviews_router)
    app.include_router(achievements_router)
    app.include_router(job_descriptions_router)

    @app.get("/health")
    async def health_check():
        views = getattr(app.state, "views", {})
        return {
            "status": "ok",
            "service": "hr-dashboard-service",
            "ready": {kind.value: not view.is_loading for kind, view in views.items()},
        }

    @app.get("/")
    async def root():
        return {
            "message": "HR Dashboard Service is running",
            "docs": "/docs",
        }

    @app.on_event("startup")
    async def on_startup():
        backend = collaborator or HttpRecordCollaborator(
            settings.BACKEND_BASE_URL,
            timeout=settings.BACKEND_TIMEOUT,
        )
        views = {}
        for kind in RecordKind:
            scope = settings.LEAVE_REQUEST_SCOPE if kind == RecordKind.LEAVE_REQUEST else "all"
            views[kind] = ListView(kind, backend, scope=scope)
        app.state.views = views

        logger.info("Loading list views from %s", settings.BACKEND_BASE_URL)
        for kind, view in views.items():
            try:
                await view.mount()
            except LoadFailure as exc:
                # 요청 시점에 ensure_loaded가 다시 시도한다
                logger.warning("Initial load failed for %s: %s", kind.value, exc)

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("Closing list views")
        for view in getattr(app.state, "views", {}).values():
            view.close()

    return app


app = create_app()
