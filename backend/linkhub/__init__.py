"""
LinkHub Backend — Application Package Initializer
==================================================

What: Marks the `linkhub` directory as a Python package.
Why:  Enables module imports like `from linkhub.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin CRUD surface over four MongoDB collections
    (users, connections, posts, messages), layered as:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Storage Calls)      │  ← One storage call per operation
    ├─────────────────────────────────────┤
    │      Queries (Mapping Layer)        │  ← Filter / update / projection docs
    ├─────────────────────────────────────┤
    │      Database (DocumentStore)       │  ← Async motor client
    └─────────────────────────────────────┘

    Routes never build query documents and services never touch HTTP
    objects, so the request-to-query mapping can be tested without a server
    or a database.
"""

__version__ = "1.0.0"
