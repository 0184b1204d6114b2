"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic; IO only appears as Protocol contracts

Design Decisions:
    - Functional core separated from imperative shell: services/ orchestrate the
      async store calls around the pure helpers defined here
"""
