"""API Layer — transport adapters in front of the dispatcher.

Invariants:
    - lambda_handler (cloud function) and routes/ (local FastAPI) both delegate to dispatch()
    - No adapter reads request bodies

Design Decisions:
    - Thin adapters: routing and envelopes stay in services/ and core/
"""
