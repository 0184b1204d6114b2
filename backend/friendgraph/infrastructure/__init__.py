"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All SQLAlchemy failures mapped to core error types before leaving this layer
"""
