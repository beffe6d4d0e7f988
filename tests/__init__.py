"""Test suite for Storefront Auth.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, services and domain logic in isolation
- integration/: Integration tests - real PyJWT/bcrypt, optional PostgreSQL
- api/: API endpoint tests - HTTP request/response through TestClient
- smoke/: Smoke tests - Critical user journeys over in-memory storage
"""
