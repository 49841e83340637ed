# Middleware package init
"""
Foody Backend: Middleware Package
====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Starlette built-ins registered in main.py
"""
