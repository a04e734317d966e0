"""
Changelog Preset

Keep-a-changelog writer preset: turns parsed conventional commits into
Added / Fixed / Changed / Removed sections with linked issues and users.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: transform/commit.py (classification), output (colors), cli (summary view)
COMMIT_TYPES = {
    'add': 'Added',
    'fix': 'Fixed',
    'change': 'Changed',
    'remove': 'Removed',
}

# Display labels in table order, for validation and display
COMMIT_TYPE_LABELS = list(COMMIT_TYPES.values())

# Every breaking-change note is filed under this heading
BREAKING_CHANGES_TITLE = 'BREAKING CHANGES'
