"""Route Modules — FastAPI routers for the local development server.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to services.dispatch)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
