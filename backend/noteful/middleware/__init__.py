# Middleware package init
"""
Noteful Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID, stored in a ContextVar and echoed back
    2. Access Log: one line per request with status and duration
    3. GZip / CORS: FastAPI's stock middleware
"""
