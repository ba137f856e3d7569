"""
BookStore API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Data access, one repository per entity
- routers/: API route handlers
- services/: Mapping, validation, identity store and token signing
"""

__version__ = "0.1.0"
