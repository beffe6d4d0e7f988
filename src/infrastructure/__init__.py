"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories and the SQLAlchemy unit of work
- Security adapters (bcrypt hashing, JWT access tokens, opaque tokens)
- Email delivery and structured logging
- Background jobs (token cleanup scheduler)

Structure:
- persistence/: PostgreSQL models, repositories, unit of work
- security/: Password hashing and token issuing
- email/: Email service implementations
- logging/: structlog-based logger adapter
- jobs/: APScheduler runners

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
