# Middleware package init
"""
Blog Backend: Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the logging middleware and the error handlers
    see the ID; the response passes back through the chain in reverse and
    picks up the X-Request-ID header on the way out.
"""
