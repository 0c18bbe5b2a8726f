"""
HTTP Request/Response logging middleware for FastAPI.

Every request gets a short request_id, stored in a ContextVar so all log
lines emitted while handling it carry the same id, and echoed back in the
X-Request-ID response header.
"""
import time
import uuid
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .logging_config import request_id_var

logger = logging.getLogger("cinecatalog.middleware")


def _format_bytes(size: int) -> str:
    """Format byte count to human-readable string."""
    if size < 1024:
        return f"{size}B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def _format_duration(duration_ms: int) -> str:
    if duration_ms >= 1000:
        return f"{duration_ms / 1000:.1f}s"
    return f"{duration_ms}ms"


def _header_int(headers, name: str) -> int:
    try:
        return int(headers.get(name, "0"))
    except (ValueError, TypeError):
        return 0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line when a request arrives and one when its response leaves."""

    # Documentation and health probes are not logged
    SKIP_PATHS = frozenset({"/health", "/openapi.json", "/api-docs", "/redoc", "/favicon.ico"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        req_id = uuid.uuid4().hex[:12]
        token = request_id_var.set(req_id)

        method = request.method
        path = request.url.path
        query = str(request.url.query)
        full_path = f"{path}?{query}" if query else path
        client_ip = request.client.host if request.client else "unknown"
        req_size = _header_int(request.headers, "content-length")

        logger.info(
            f"→ {method} {full_path} {_format_bytes(req_size)}",
            extra={"method": method, "path": path, "client_ip": client_ip, "request_size": req_size}
        )

        start_time = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                duration_ms = round((time.perf_counter() - start_time) * 1000)
                logger.error(
                    f"✗ {method} {full_path} {duration_ms}ms | {type(exc).__name__}: {exc}",
                    extra={"method": method, "path": path, "duration_ms": duration_ms, "status_code": 500},
                    exc_info=True,
                )
                raise

            duration_ms = round((time.perf_counter() - start_time) * 1000)
            status = response.status_code
            resp_size = _header_int(response.headers, "content-length")

            if status >= 500:
                log_fn = logger.error
            elif status >= 400:
                log_fn = logger.warning
            else:
                log_fn = logger.info

            log_fn(
                f"← {status} {method} {full_path} {_format_duration(duration_ms)} {_format_bytes(resp_size)}",
                extra={
                    "method": method, "path": path,
                    "status_code": status, "duration_ms": duration_ms,
                    "response_size": resp_size, "client_ip": client_ip,
                }
            )

            response.headers["X-Request-ID"] = req_id
            return response
        finally:
            request_id_var.reset(token)
