"""
Metrics middleware for FastAPI applications.

Automatically tracks HTTP request metrics for all endpoints.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track Prometheus metrics for all HTTP requests.

    Requests are labelled with the matched route template rather than the
    raw path so agent ids do not explode label cardinality.
    """

    def __init__(self, app, track_func: Callable):
        """
        Initialize the middleware.

        Args:
            app: FastAPI application
            track_func: Called with (method, endpoint, status_code, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)

        self.track_func(
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration=duration,
        )

        return response
