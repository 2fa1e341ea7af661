"""
Roster Backend — Application Package Initializer
=================================================

What: Marks the `roster` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin layered service around one in-memory store:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Validation (request shapes)     │  ← Raw JSON → typed requests
    ├─────────────────────────────────────┤
    │      Services (UserService store)   │  ← State and CRUD rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclass records + Pydantic
    └─────────────────────────────────────┘

    Routes never touch the record list directly; every read and write goes
    through UserService, which is the only component holding state.
"""

__version__ = "1.0.0"
