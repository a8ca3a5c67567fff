"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: gates are plain predicates,
      the shell decides what to do with the answer
"""
