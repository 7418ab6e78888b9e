"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps the store-assigned integer key — never a bare int in service signatures
    - Stored ids fit a 32-bit signed INTEGER column (PostgreSQL int4)
    - Page indexes are plain ints; their base (0 or 1) is fixed per operation
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)

POST_ID_MIN = -(2**31)
POST_ID_MAX = 2**31 - 1


def is_storable_post_id(post_id: int) -> bool:
    """True if post_id can be bound against the posts.id column."""
    return POST_ID_MIN <= post_id <= POST_ID_MAX
