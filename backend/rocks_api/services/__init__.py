# Services package init
"""
Rocks API — Services Layer
============================

What:  Business logic layer sitting between routes (HTTP) and the in-memory data.
Why:   Separation of concerns — routes handle HTTP, services handle rules.

Service Inventory:
    - RockService: listing, bounds-checked indexing, parameter echo
    - CalculatorService: query-string coercion, operator dispatch, formatting

Why services are separate from routes:
    1. Testability: Services can be unit-tested without HTTP overhead
    2. Single responsibility: Routes handle HTTP; services handle logic
"""
