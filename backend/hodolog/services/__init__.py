"""Services Layer — business operations orchestrating repositories.

Invariants:
    - Services depend on repository Protocols, never on AsyncSession directly
    - Domain errors (core/errors.py) are raised here, not in repositories
"""
