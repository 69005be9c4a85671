"""Core Layer — pure domain logic, no IO, no asyncio, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the controller in services/
      owns every await, core only computes and stores values
"""
