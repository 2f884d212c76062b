"""
Quotes API - Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for every log line of the request
    2. Logging: method, path, status and duration, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
