"""Ordering of version sets by semantic-version precedence."""

from typing import Iterable, List

from .validator import InvalidVersionError, parse_version


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Return ``versions`` sorted newest first, as canonical strings.

    Entries that do not parse as semantic versions are dropped, so the result
    may be shorter than the input. Canonical strings never carry a "v" prefix.
    """
    parsed = []
    for raw in versions:
        try:
            parsed.append(parse_version(raw))
        except InvalidVersionError:
            continue  # Skip invalid versions
    parsed.sort(reverse=True)
    return [str(version) for version in parsed]
