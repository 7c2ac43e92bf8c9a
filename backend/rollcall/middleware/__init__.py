# Middleware package init
"""
Rollcall Backend — Middleware Package
=====================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Rate Limit] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID sets the correlation id that every inner layer and the
      error handlers read, and answers unhandled exceptions with a 500
    - Rate Limit rejects over-limit clients before any other work
    - Logging measures the full downstream duration and final status
"""
