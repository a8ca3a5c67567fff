"""Services Layer — runs core gates on decoded state and logs the outcome.

Invariants:
    - Services never mutate or persist state
    - One function per gate entry point (no dispatch tables)
"""
