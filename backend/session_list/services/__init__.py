"""Services Layer — session list controller, task scope, and session stores.

Invariants:
    - Every await on a store happens here, never in core/
    - Controller public methods return immediately; results arrive as view-state changes

Design Decisions:
    - Stores implement core.repository_protocols.SessionStore structurally (no base class)
"""
