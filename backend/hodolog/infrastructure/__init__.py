"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - SQLAlchemy errors are mapped to DatabaseError at the session boundary
    - Repository implementations satisfy the Protocols in core/repository_protocols.py
"""
