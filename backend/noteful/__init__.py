"""
Noteful Backend — Application Package Initializer
===================================================

What:  Marks the `noteful` directory as a Python package.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, request validation
    ├─────────────────────────────────────┤
    │     Dependencies (existence probe)  │  ← typed row for /{id} routes
    ├─────────────────────────────────────┤
    │        Services (Data Access)       │  ← one statement per operation
    ├─────────────────────────────────────┤
    │  Models, Schemas & Sanitizer (Data) │  ← SQLAlchemy ORM + Pydantic DTOs
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
