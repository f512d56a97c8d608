# Middleware package init
"""
Rocks API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: Generate (or accept) a correlation ID
    2. Logging: Log method, path, status and duration with that ID

    The response passes back through in reverse, which is where the
    X-Request-ID header is attached and the duration is measured.
"""
