"""Expand template names into candidate storage keys."""

from collections.abc import Iterable


def _clean_segments(value: str) -> str:
    # Segments made only of dots (".", "..") and empty segments are dropped
    return "/".join(
        segment for segment in value.split("/") if segment and segment.strip(".")
    )


def normalize_prefix(value: str) -> str:
    """Normalize a search path entry, e.g. "./x/" becomes "x"."""
    return _clean_segments((value or "").strip())


def normalize_name(name: str | None) -> str:
    """Normalize a template name.

    Leading "./" is stripped and relative or empty segments are silently
    dropped, so "./a//../b" becomes "a/b". Never raises.
    """
    name = name or ""
    while name.startswith("./"):
        name = name[2:]
    return _clean_segments(name)


def expand(name: str, search_path: Iterable[str] = ()) -> list[str]:
    """Return the ordered candidate keys for a template name.

    The bare name always comes first, followed by each distinct non-blank
    search path prefix in configured order.
    """
    candidates = [name]
    seen_prefixes: set[str] = set()
    for entry in search_path:
        prefix = normalize_prefix(entry)
        if not prefix or prefix in seen_prefixes:
            continue
        seen_prefixes.add(prefix)
        key = f"{prefix}/{name}"
        if key not in candidates:
            candidates.append(key)
    return candidates
