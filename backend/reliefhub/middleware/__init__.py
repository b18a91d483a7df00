# Middleware package init
"""
ReliefHub Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID first so every log line of the request can carry it
    - Logging measures duration and status around everything below it
    - CORS is FastAPI's CORSMiddleware (handles preflight)
"""
