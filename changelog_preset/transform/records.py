"""Commit Records - Parsed commits and the repository context they are rendered in."""

import json
from dataclasses import dataclass, field, asdict, fields
from typing import Any, Optional


class RecordError(Exception):
    """Raised when exported commit data cannot be read."""
    pass


def _known_keys(cls, data: dict) -> dict:
    valid_keys = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in valid_keys}


@dataclass
class Note:
    """A breaking-change annotation attached to a commit."""
    title: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> 'Note':
        return cls(**_known_keys(cls, data))


@dataclass
class Reference:
    """A cross-reference from a commit footer, e.g. 'closes #10'."""
    issue: Any = None
    action: Optional[str] = None
    owner: Optional[str] = None
    repository: Optional[str] = None
    prefix: str = "#"
    raw: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> 'Reference':
        return cls(**_known_keys(cls, data))


@dataclass
class CommitRecord:
    """One parsed commit, as handed over by the changelog pipeline.

    The transform mutates the record in place. Fields it does not touch
    (header, body, footer, mentions) are carried through for templates.
    """
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    hash: Optional[str] = None
    header: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    notes: list[Note] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)
    mentions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'CommitRecord':
        """Build a record from parser output, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise RecordError(f"Commit record must be an object, got {type(data).__name__}")
        filtered = _known_keys(cls, data)
        filtered['notes'] = [Note.from_dict(n) for n in data.get('notes') or [] if isinstance(n, dict)]
        filtered['references'] = [
            Reference.from_dict(r) for r in data.get('references') or [] if isinstance(r, dict)
        ]
        mentions = data.get('mentions') or []
        if not isinstance(mentions, list):
            raise RecordError(f"Commit mentions must be a list, got {type(mentions).__name__}")
        filtered['mentions'] = list(mentions)
        return cls(**filtered)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RenderContext:
    """Repository metadata shared by every commit in a batch."""
    host: Optional[str] = None
    owner: Optional[str] = None
    repository: Optional[str] = None
    repo_url: Optional[str] = None

    @property
    def base_url(self) -> Optional[str]:
        """Composed host/owner/repository wins whenever a repository is set."""
        if self.repository:
            return f"{self.host or ''}/{self.owner or ''}/{self.repository}"
        return self.repo_url


def load_records(text: str) -> list[CommitRecord]:
    """Parse exported commits: a JSON array, or one JSON object per line."""
    stripped = text.strip()
    if not stripped:
        return []

    if stripped.startswith('['):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise RecordError(f"Invalid commit JSON: {e}")
        return [CommitRecord.from_dict(item) for item in data]

    records = []
    for lineno, line in enumerate(stripped.split('\n'), 1):
        if not line.strip():
            continue
        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordError(f"Invalid commit JSON on line {lineno}: {e}")
        records.append(CommitRecord.from_dict(item))
    return records
