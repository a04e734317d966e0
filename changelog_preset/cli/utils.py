"""CLI Utility Functions"""

import sys
from pathlib import Path

from changelog_preset.transform import CommitRecord, RecordError
from changelog_preset.output import dim, bold, BULLET, highlight_links

# --print-template name -> WriterOptions field
TEMPLATE_OPTIONS = {
    'main': 'main_template',
    'header': 'header_partial',
    'commit': 'commit_partial',
    'footer': 'footer_partial',
}


def read_input(path: str | None) -> str:
    """Read commit JSON from a file, or stdin when no path is given."""
    if not path or path == '-':
        if sys.stdin.isatty():
            raise RecordError("No input. Pass a FILE or pipe parsed commits on stdin.")
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise RecordError(f"Could not read {path}: {e}")


def format_commit_line(commit: CommitRecord) -> str:
    """One summary line: scope, subject with link labels, short hash."""
    parts = [f"  {dim(BULLET)}"]
    if commit.scope:
        parts.append(bold(f"{commit.scope}:"))
    parts.append(highlight_links(commit.subject or commit.header or ''))
    if commit.hash:
        parts.append(dim(f"({commit.hash})"))
    references = ', '.join(
        f"{f'{r.owner}/' if r.owner else ''}{r.repository or ''}{r.prefix or '#'}{r.issue}"
        for r in commit.references
    )
    if references:
        parts.append(dim(f"closes {references}"))
    return ' '.join(parts)
