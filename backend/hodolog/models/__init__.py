"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete before create_all
"""

from hodolog.models.post import Post  # noqa: F401
