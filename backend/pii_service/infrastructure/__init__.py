"""Infrastructure Layer — process-level concerns (logging setup).

Invariants:
    - No routing or envelope logic lives here
"""
