"""Domain layer - Pure business logic.

This layer contains the core business entities, enums, protocols (ports),
validators and error messages. The domain layer has NO dependencies on any
framework or infrastructure.

Structure:
- entities/: Domain entities (User, Token)
- enums/: UserRole, TokenType
- protocols/: Repository, unit of work and service interfaces
- validators/: Pure validation functions used by the Annotated types
"""
