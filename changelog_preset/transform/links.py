"""Link Rewriting - Turn issue numbers and @mentions in commit subjects into markdown links."""

import re

ISSUE_PATTERN = re.compile(r'#([0-9]+)')

# GitHub username rules: alphanumerics and single hyphens, max 39 chars, no
# leading hyphen. \B keeps "npm@5" or "user@host" from matching; only ASCII
# letters and digits count as word characters before the @.
USER_PATTERN = re.compile(r'\B@([a-z0-9](?:-?[a-z0-9]){0,38})', re.ASCII)


def link_issues(text: str, base_url: str | None) -> tuple[str, list[str]]:
    """Replace each #N with an issue link.

    Returns the rewritten text and the issue numbers linked, in order of
    appearance (duplicates kept). Without a base URL the text is untouched.
    """
    if not base_url:
        return text, []

    issues_url = f"{base_url}/issues/"
    issues = []

    def _replace(match: re.Match) -> str:
        issue = match.group(1)
        issues.append(issue)
        return f"[#{issue}]({issues_url}{issue})"

    return ISSUE_PATTERN.sub(_replace, text), issues


def link_users(text: str, host: str | None) -> str:
    """Replace each @username with a link to the user's profile on host."""
    if not host:
        return text
    return USER_PATTERN.sub(lambda m: f"[@{m.group(1)}]({host}/{m.group(1)})", text)
