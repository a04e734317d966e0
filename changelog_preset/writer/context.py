"""Changelog Context - Run commits through the preset and group them for rendering."""

from dataclasses import dataclass, field
from typing import Iterable

from changelog_preset.transform import CommitRecord, Note, RenderContext
from changelog_preset.writer.ordering import get_field, stable_sort
from changelog_preset.writer.preset import WriterOptions, get_writer_opts


@dataclass
class CommitGroup:
    """One changelog section, e.g. 'Added'."""
    title: str
    commits: list[CommitRecord] = field(default_factory=list)


@dataclass
class NoteEntry:
    """A note together with the commit it came from."""
    note: Note
    commit: CommitRecord

    @property
    def title(self) -> str:
        return self.note.title

    @property
    def text(self) -> str:
        return self.note.text


@dataclass
class NoteGroup:
    title: str
    notes: list[NoteEntry] = field(default_factory=list)


@dataclass
class ChangelogContext:
    """Grouped, sorted data ready for the templates."""
    commit_groups: list[CommitGroup] = field(default_factory=list)
    note_groups: list[NoteGroup] = field(default_factory=list)
    total_commits: int = 0
    omitted_commits: int = 0

    @property
    def kept_commits(self) -> int:
        return self.total_commits - self.omitted_commits

    def to_dict(self) -> dict:
        return {
            "commitGroups": [
                {"title": g.title, "commits": [c.to_dict() for c in g.commits]}
                for g in self.commit_groups
            ],
            "noteGroups": [
                {
                    "title": g.title,
                    "notes": [
                        {"title": n.title, "text": n.text, "commit": {"hash": n.commit.hash, "subject": n.commit.subject}}
                        for n in g.notes
                    ],
                }
                for g in self.note_groups
            ],
        }


def _group(items: Iterable, key) -> dict:
    # dicts keep insertion order, so groups start in order of first appearance
    groups: dict = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def generate_context(
    commits: Iterable[CommitRecord],
    context: RenderContext,
    options: WriterOptions | None = None,
) -> ChangelogContext:
    """Transform commits, drop omitted ones, then group and sort the rest."""
    options = options or get_writer_opts()
    total = 0
    kept = []
    for commit in commits:
        total += 1
        result = options.transform(commit, context)
        if result is not None:
            kept.append(result)

    group_by = options.group_by
    by_type = _group(kept, group_by if callable(group_by) else lambda c: get_field(c, group_by))
    commit_groups = [
        CommitGroup(title=title, commits=stable_sort(group, options.commits_sort))
        for title, group in by_type.items()
    ]
    commit_groups = stable_sort(commit_groups, options.commit_groups_sort)

    entries = [NoteEntry(note=note, commit=commit) for commit in kept for note in commit.notes or []]
    by_title = _group(entries, lambda n: n.title)
    note_groups = [
        NoteGroup(title=title, notes=stable_sort(group, options.notes_sort))
        for title, group in by_title.items()
    ]
    note_groups = stable_sort(note_groups, options.note_groups_sort)

    return ChangelogContext(
        commit_groups=commit_groups,
        note_groups=note_groups,
        total_commits=total,
        omitted_commits=total - len(kept),
    )
