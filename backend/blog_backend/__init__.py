"""
Blog Backend: Application Package Initializer
===============================================

Architecture Note:
    The backend is layered the same way for every request:

    ┌─────────────────────────────────────┐
    │   Views (HTML)  →  PostsClient      │  ← server-rendered screens
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Storage calls)    │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Views reach the API over HTTP, never by calling services directly.
"""

__version__ = "1.0.0"
