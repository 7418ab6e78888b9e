"""Post Editing — merge a partial edit onto an existing post.

Invariants:
    - Only fields present (non-null) in the edit overwrite the target
    - The id is never touched
    - Returns the names of the fields that were written (empty tuple = no-op)
"""

from hodolog.core.repository_protocols import PostLike

EDITABLE_FIELDS = ("title", "content")


def apply_post_edit(post: PostLike, changes: dict) -> tuple[str, ...]:
    """Copy the non-null editable fields of `changes` onto `post`."""
    written = []
    for name in EDITABLE_FIELDS:
        value = changes.get(name)
        if value is None:
            continue
        setattr(post, name, value)
        written.append(name)
    return tuple(written)
