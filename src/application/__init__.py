"""Application layer - Use cases and orchestration.

This layer contains the auth use cases following the CQRS pattern:
- Commands: Write operations that change state (one handler per command)
- Queries: Read operations that fetch data
- Services: Session limiting and token cleanup shared by handlers and jobs

The application layer orchestrates domain logic through the unit of work
and the domain protocols.
"""
