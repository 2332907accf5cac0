"""HTTP shell for riot-proxy."""

from .app import create_app, cors_middleware, CORS_HEADERS

__all__ = ["create_app", "cors_middleware", "CORS_HEADERS"]
