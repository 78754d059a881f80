import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class RequestTrackerMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an ID and records how long it took.

    The ID is stored on request.state for handlers and echoed back in the
    X-Request-ID header together with X-Process-Time.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = f"req_{uuid.uuid4().hex[:8]}_{int(time.time() * 1000)}"
        request.state.request_id = request_id
        started = time.perf_counter()

        logger.debug(
            "Incoming request",
            extra={
                "event": "request_started",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
            },
        )

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"

        logger.debug(
            "Request completed",
            extra={
                "event": "request_finished",
                "request_id": request_id,
                "status_code": response.status_code,
                "process_time": elapsed,
            },
        )
        return response
