"""Preset - Writer options handed to the changelog pipeline."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional

from changelog_preset.transform import transform_commit
from changelog_preset.writer.ordering import (
    Comparator, commit_order, group_key, group_order, note_group_order, note_order,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Option field -> fragment file
TEMPLATE_FILES = {
    "main_template": "template.hbs",
    "header_partial": "header.hbs",
    "commit_partial": "commit.hbs",
    "footer_partial": "footer.hbs",
}


class PresetError(Exception):
    """Raised when the preset's template fragments cannot be loaded."""
    pass


@dataclass
class WriterOptions:
    """Everything the pipeline needs to write a keep-a-changelog section."""
    transform: Callable = transform_commit
    group_by: str | Callable = group_key
    commit_groups_sort: Comparator = group_order
    commits_sort: Comparator = commit_order
    note_groups_sort: Comparator = note_group_order
    notes_sort: Comparator = note_order
    main_template: Optional[str] = None
    header_partial: Optional[str] = None
    commit_partial: Optional[str] = None
    footer_partial: Optional[str] = None

    @property
    def has_templates(self) -> bool:
        return all(getattr(self, name) is not None for name in TEMPLATE_FILES)


def get_writer_opts() -> WriterOptions:
    """Transform and sort rules without templates."""
    return WriterOptions()


def read_template(name: str, templates_dir: Path | None = None) -> str:
    """Read one fragment by file name, e.g. 'commit.hbs'."""
    path = Path(templates_dir or TEMPLATES_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise PresetError(f"Could not read template {path}: {e}")


def load_preset(templates_dir: Path | str | None = None) -> WriterOptions:
    """Writer options with all four template fragments loaded."""
    fragments = {
        option: read_template(filename, templates_dir)
        for option, filename in TEMPLATE_FILES.items()
    }
    return replace(get_writer_opts(), **fragments)
