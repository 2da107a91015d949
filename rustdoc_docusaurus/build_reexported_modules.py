"""Logic for finding modules that are re-exported into other modules."""

from rustdoc_docusaurus.item_kind import ItemKind
from rustdoc_docusaurus.item_store import ItemStore


def build_reexported_modules(
    store: ItemStore, *, include_private: bool = False
) -> dict[str, list[tuple[str, str]]]:
    """Map each module path to the (name, full path) of modules it re-exports.

    `pub use a::b;` contributes `b` when `b` is a module; `pub use a::*;`
    contributes every visible submodule of `a`.
    """
    reexports: dict[str, set[tuple[str, str]]] = {}

    for module_id, module_item in store.index.items():
        if module_item.kind is not ItemKind.MODULE:
            continue
        entry = store.path_of(module_id)
        if entry is None:
            continue
        module_path = entry.joined()

        for member_id in module_item.members:
            member = store.get(member_id)
            if member is None or member.reexport is None:
                continue
            if not include_private and not member.is_public:
                continue
            target_id = member.reexport.target_id
            target = store.get(target_id) if target_id else None
            if target is None or target.kind is not ItemKind.MODULE:
                continue

            if member.reexport.is_glob:
                candidates = list(target.members)
            else:
                candidates = [target_id]

            for candidate_id in candidates:
                candidate = store.get(candidate_id)
                if candidate is None or candidate.kind is not ItemKind.MODULE:
                    continue
                if member.reexport.is_glob and not (
                    include_private or candidate.is_public
                ):
                    continue
                candidate_entry = store.path_of(candidate_id)
                if candidate.name and candidate_entry:
                    reexports.setdefault(module_path, set()).add(
                        (candidate.name, candidate_entry.joined())
                    )

    return {key: sorted(pairs) for key, pairs in reexports.items()}
