import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from edusync.api import (
    academic_api, admin_api, ai_api, assignment_api, attendance_api, auth_api, message_api,
    report_api, resource_api, student_api, task_api, teacher_api, timetable_api, user_api,
)
from edusync.auth.auth_handler import AuthService
from edusync.auth.passwords import PasswordHasher
from edusync.configs.settings import Settings, settings as default_settings
from edusync.exceptions import (
    AccountNotApproved, AIServiceError, ConnectivityError, EduSyncError, EmailAlreadyRegistered,
    Forbidden, InvalidCredentials, NotAuthenticated,
)
from edusync.services.ai_service import TutorAssistant
from edusync.services.seed_service import seed_admin, seed_demo_data
from edusync.storage import MemoryStorage, Storage, build_storage
from edusync.utils.logging import setup_logging

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidCredentials: 401,
    NotAuthenticated: 401,
    AccountNotApproved: 403,
    Forbidden: 403,
    EmailAlreadyRegistered: 409,
    AIServiceError: 502,
    ConnectivityError: 503,
}

ROUTERS = [
    auth_api, admin_api, user_api, student_api, teacher_api, academic_api, attendance_api,
    assignment_api, message_api, resource_api, timetable_api, task_api, report_api, ai_api,
]


def _error_handler(status_code: int):
    async def handler(request: Request, exc: EduSyncError):
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None,
               tutor: Optional[TutorAssistant] = None) -> FastAPI:
    """Build the dashboard API around a storage backend.

    ``storage`` and ``tutor`` default to what ``settings`` describes; tests pass
    their own to keep each app isolated.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    storage = storage or build_storage(settings)
    hasher = PasswordHasher(settings.PASSWORD_SCHEME, settings.PASSWORD_SALT_SIZE)

    if settings.SEED_DEMO_DATA and isinstance(storage, MemoryStorage):
        seed_demo_data(storage, hasher)
    else:
        seed_admin(storage, hasher)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{settings.APP_NAME} started with {type(storage).__name__}")
        yield
        storage.close()

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage
    app.state.auth_service = AuthService(storage, hasher, require_approval=settings.REQUIRE_APPROVAL)
    app.state.tutor = tutor or TutorAssistant(api_key=settings.OPENAI_API_KEY, model_name=settings.AI_MODEL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for error, status_code in ERROR_STATUS.items():
        app.add_exception_handler(error, _error_handler(status_code))

    for module in ROUTERS:
        app.include_router(module.router, prefix="/api")

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    import uvicorn

    # same as: uvicorn edusync.main:create_app --factory
    uvicorn.run("edusync.main:create_app", factory=True, host="0.0.0.0", port=8000)
