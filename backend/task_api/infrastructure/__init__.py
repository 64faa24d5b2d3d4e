"""Infrastructure Layer — database plumbing and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain rules from core/ (only errors)
    - All database errors mapped to typed DatabaseError

Design Decisions:
    - Resilient wrappers over raw clients (ADR: single responsibility)
"""
