"""Presentation layer - API endpoints and HTTP concerns.

Thin FastAPI routers: each endpoint builds a command or query, dispatches it
to its handler and translates the Result into an HTTP response.

Structure:
- routers/system.py: root and health endpoints
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: trace ID and authentication dependencies

Contains NO business logic.
"""
