"""Logic for deriving the module parent/child graph from module bucket keys."""

from collections.abc import Iterable

PATH_SEP = "::"


def build_module_hierarchy(
    module_keys: Iterable[str], crate_name: str
) -> dict[str, list[str]]:
    """Build a mapping of module path to its direct child module paths.

    Every key contributes each parent/child split along its `::` segments, so
    intermediate modules appear as parents even if they are not keys themselves.
    """
    children: dict[str, set[str]] = {}
    for key in module_keys:
        if not key or key == crate_name:
            continue
        parts = key.split(PATH_SEP)
        for i in range(1, len(parts)):
            parent = PATH_SEP.join(parts[:i])
            child = PATH_SEP.join(parts[: i + 1])
            children.setdefault(parent, set()).add(child)
    return {parent: sorted(kids) for parent, kids in children.items()}


def parent_of(module_key: str) -> str | None:
    """Return the parent module path, or None for a top-level path."""
    if PATH_SEP not in module_key:
        return None
    return module_key.rsplit(PATH_SEP, 1)[0]


def direct_children(module_keys: Iterable[str], parent: str) -> list[str]:
    """Return the sorted keys exactly one level below parent."""
    prefix = parent + PATH_SEP
    return sorted(
        key
        for key in module_keys
        if key.startswith(prefix) and PATH_SEP not in key[len(prefix) :]
    )
