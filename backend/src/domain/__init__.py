"""
DOMAIN LAYER - The Heart of the Forum

This layer contains:
- Entities: Self-validating thread/comment objects (NewThread, AddedComment, ...)
- Value Objects: Immutable read shapes (ThreadDetail, DetailThread, ...)
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Error codes, client errors and DomainErrorTranslator

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. NO logging: failures are raised and left to the presentation layer
"""
