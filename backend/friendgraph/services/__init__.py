"""Services Layer — managers and the recipient resolver.

Invariants:
    - Services depend on the GraphStore Protocol only, never on SQLAlchemy
    - One instance per request; no service holds mutable shared state
    - Store failures propagate unchanged (StoreError already names the operation)
"""
