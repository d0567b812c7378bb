from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Error with an HTTP status, rendered as ``{success: false, message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.error = error


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 400


class InternalError(AppError):
    status_code = 500


async def app_error_handler(request: Request, exc: AppError):
    content = {"success": False, "message": exc.message}
    if exc.error is not None:
        content["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=content)


# body errors FastAPI catches before the handler runs, keyed by endpoint
BODY_ERROR_MESSAGES = {
    "createCategory": "All fields are required",
    "capturePayment": "Please provide course IDs",
    "verifyPayment": "Payment Failed",
    "sendPaymentSuccessEmail": "Please provide all the fields",
}


async def request_validation_handler(request: Request, exc: RequestValidationError):
    endpoint = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    message = BODY_ERROR_MESSAGES.get(endpoint, "Invalid request body")
    return JSONResponse(status_code=400, content={"success": False, "message": message})
