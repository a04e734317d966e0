"""Changelog Writer Package"""

from changelog_preset.writer.ordering import (
    compare_by, get_field, group_key, group_order, commit_order,
    note_group_order, note_order, stable_sort,
)
from changelog_preset.writer.preset import (
    WriterOptions, PresetError, get_writer_opts, load_preset, read_template, TEMPLATE_FILES,
)
from changelog_preset.writer.context import (
    ChangelogContext, CommitGroup, NoteGroup, NoteEntry, generate_context,
)

__all__ = [
    "compare_by",
    "get_field",
    "group_key",
    "group_order",
    "commit_order",
    "note_group_order",
    "note_order",
    "stable_sort",
    "WriterOptions",
    "PresetError",
    "get_writer_opts",
    "load_preset",
    "read_template",
    "TEMPLATE_FILES",
    "ChangelogContext",
    "CommitGroup",
    "NoteGroup",
    "NoteEntry",
    "generate_context",
]
