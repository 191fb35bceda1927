"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: Dependencies for DI injection into routes (auth)
- errors.py: Exception handlers built on DomainErrorTranslator
"""
