"""
DMP Server Package.

This package contains the web server implementation for the DMP backend.
It includes the API definition, request guards, middleware and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Core configuration and constants.
    exception_handlers: Translation of domain errors to HTTP responses.
    middleware: Request/response logging.
    services: Authentication and request-scoped access guards.
"""
