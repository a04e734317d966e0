"""Commit Transform - Prepare one parsed commit for the keep-a-changelog templates."""

from changelog_preset import COMMIT_TYPES, BREAKING_CHANGES_TITLE
from changelog_preset.transform.links import link_issues, link_users
from changelog_preset.transform.records import CommitRecord, RenderContext

SHORT_HASH_LENGTH = 7


def transform_commit(commit: CommitRecord, context: RenderContext) -> CommitRecord | None:
    """Rewrite a commit in place for display.

    Returns the same record, or None when its type has no changelog
    section and it should be left out. Applying this twice to one record
    mangles the already-linked subject, so the pipeline calls it once.
    """
    for note in commit.notes or []:
        note.title = BREAKING_CHANGES_TITLE

    label = COMMIT_TYPES.get(commit.type) if isinstance(commit.type, str) else None
    if label is None:
        return None
    commit.type = label

    if commit.scope == '*':
        commit.scope = ''

    if isinstance(commit.hash, str):
        commit.hash = commit.hash[:SHORT_HASH_LENGTH]

    issues: list[str] = []
    if isinstance(commit.subject, str):
        commit.subject, issues = link_issues(commit.subject, context.base_url)
        commit.subject = link_users(commit.subject, context.host)

    # Issues already linked in the subject would be listed twice otherwise
    commit.references = [r for r in commit.references or [] if r.issue not in issues]

    return commit
