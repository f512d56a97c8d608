"""
Rocks API — Application Package Initializer
=============================================

What: Marks the `rocks_api` directory as a Python package.
Why:  Enables module imports like `from rocks_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service follows the same layered shape as any larger API, even though
    each layer here is only a few lines:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Rock lookup, calculator
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← ROCKS tuple, Operator, Pydantic
    └─────────────────────────────────────┘

    There is no persistence layer: the rock collection is an in-memory
    constant that lives for the lifetime of the process.
"""

__version__ = "1.0.0"
