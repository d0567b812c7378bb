import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from studynotion.config.database import init_connections
from studynotion.config.settings import setup_logging
from studynotion.api.middleware.session_middleware import session_middleware
from studynotion.api.routes.category_routes import router as category_router
from studynotion.api.routes.payment_routes import router as payment_router
from studynotion.utils.errors import AppError, app_error_handler, request_validation_handler

logger = logging.getLogger(__name__)


def create_app(init_db: bool = True) -> FastAPI:
    setup_logging()

    if init_db:
        try:
            init_connections()
        except Exception as e:
            logger.warning(f"⚠️ Error initializing connections: {e}")

    app = FastAPI(title="StudyNotion Catalog & Payments API", version="1.0.0",
                  description="Course catalog and Razorpay checkout for StudyNotion.")

    # resolves Authorization: Bearer / X-Session-Id into request.state.user_id
    app.middleware("http")(session_middleware)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/", tags=["Health"])
    async def root():
        return {"success": True, "message": "✅ StudyNotion API is up and running."}

    app.include_router(category_router, prefix="/api/v1")
    app.include_router(payment_router, prefix="/api/v1")

    return app
