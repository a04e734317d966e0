"""Commit Transform Package"""

from changelog_preset.transform.records import (
    CommitRecord, Note, Reference, RenderContext, RecordError, load_records,
)
from changelog_preset.transform.links import link_issues, link_users, ISSUE_PATTERN, USER_PATTERN
from changelog_preset.transform.commit import transform_commit, SHORT_HASH_LENGTH

__all__ = [
    "CommitRecord",
    "Note",
    "Reference",
    "RenderContext",
    "RecordError",
    "load_records",
    "link_issues",
    "link_users",
    "ISSUE_PATTERN",
    "USER_PATTERN",
    "transform_commit",
    "SHORT_HASH_LENGTH",
]
