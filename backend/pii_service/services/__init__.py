"""Services Layer — route handlers and the request dispatcher.

Invariants:
    - Handlers are zero-argument and never read request content
    - dispatch() is the only entry point transports call

Design Decisions:
    - One module per concern: health, PII stubs, dispatch
"""
