"""Ordering Rules - Group keys and comparators for changelog sections."""

from functools import cmp_to_key
from typing import Any, Callable, Iterable

Comparator = Callable[[Any, Any], int]


def get_field(item: Any, path: str) -> Any:
    """Read a dotted path from dicts or objects; missing parts give None."""
    value = item
    for part in path.split('.'):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _compare_values(a: Any, b: Any) -> int:
    # None sorts as the empty string so missing scopes group with ""
    a = '' if a is None else a
    b = '' if b is None else b
    try:
        return (a > b) - (a < b)
    except TypeError:
        # Unorderable pairs (records, mixed types) keep their input order
        return 0


def _accessor(spec: str | Callable) -> Callable[[Any], Any]:
    if callable(spec):
        return spec
    return lambda item: get_field(item, spec)


def compare_by(*fields: str | Callable | tuple) -> Comparator:
    """Build a comparator that sorts by each field in turn.

    A field is a dotted path, a callable, or a (field, descending) pair.
    With no fields the items themselves are compared.

    Example: compare_by('scope', ('subject', True)) sorts by scope
    ascending, then subject descending.
    """
    keys = []
    for spec in fields:
        if isinstance(spec, tuple):
            accessor, descending = spec
            keys.append((_accessor(accessor), bool(descending)))
        else:
            keys.append((_accessor(spec), False))

    def _compare(a: Any, b: Any) -> int:
        if not keys:
            return _compare_values(a, b)
        for get, descending in keys:
            result = _compare_values(get(a), get(b))
            if result:
                return -result if descending else result
        return 0

    return _compare


def group_key(commit: Any) -> Any:
    """Commits are grouped under their display label (the 'type' field)."""
    return get_field(commit, 'type')


group_order = compare_by('title')
commit_order = compare_by('scope', 'subject')
note_group_order = compare_by('title')
note_order = compare_by()


def stable_sort(items: Iterable, comparator: Comparator) -> list:
    """Sort with a comparator; ties keep their input order."""
    return sorted(items, key=cmp_to_key(comparator))
