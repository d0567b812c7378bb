from fastapi import Request
from fastapi.responses import JSONResponse
import logging
from studynotion.config.database import get_redis_client

logger = logging.getLogger(__name__)

PUBLIC_PATHS = {
	"/",
	"/docs",
	"/openapi.json",
	"/api/v1/course/showAllCategories",
	"/api/v1/course/getCategoryPageDetails",
}


def _unauthorized(message: str, status_code: int = 401) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def session_middleware(request: Request, call_next):
	"""
	HTTP middleware that resolves the session before the request is handled.
	- Public routes (catalog reads, docs, health) pass through
	- Other routes need a token (Authorization: Bearer or X-Session-Id)
	- The token is looked up in Redis; a missing or expired one answers 401
	"""

	path = request.url.path
	request.state.user_id = None

	if path in PUBLIC_PATHS or path.startswith("/favicon"):
		return await call_next(request)

	auth_header = request.headers.get("authorization")
	session_id = None

	if auth_header and isinstance(auth_header, str) and auth_header.lower().startswith("bearer "):
		session_id = auth_header.split(" ", 1)[1].strip()
	else:
		session_id = request.headers.get("x-session-id")

	if not session_id:
		return _unauthorized("Missing or invalid session token")

	try:
		r = get_redis_client()
		user_id = r.get(session_id)
	except Exception as e:
		logger.error(f"Error connecting to Redis in middleware: {e}")
		return _unauthorized("Redis connection error", status_code=500)

	if not user_id:
		return _unauthorized("Session invalid or expired")

	if isinstance(user_id, bytes):
		user_id = user_id.decode("utf-8")

	request.state.user_id = user_id

	return await call_next(request)
