"""Removing folders whose sub-folder structures are identical."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Folder:
    name: str
    children: dict[str, _Folder] = field(default_factory=dict)
    deleted: bool = False

    def sorted_children(self) -> list[_Folder]:
        return [self.children[name] for name in sorted(self.children)]


def _build_tree(paths: Iterable[Sequence[str]]) -> _Folder:
    root = _Folder("")
    for path in paths:
        current = root
        for name in path:
            current = current.children.setdefault(name, _Folder(name))
    return root


def _signature(folder: _Folder, groups: dict[str, list[_Folder]]) -> str:
    if not folder.children:
        return ""
    signature = "".join(
        f"{child.name}({_signature(child, groups)})" for child in folder.sorted_children()
    )
    groups[signature].append(folder)
    return signature


def _collect(folder: _Folder, prefix: list[str], result: list[list[str]]) -> None:
    prefix.append(folder.name)
    result.append(list(prefix))
    for child in folder.sorted_children():
        if not child.deleted:
            _collect(child, prefix, result)
    prefix.pop()


def delete_duplicate_folders(paths: Iterable[Sequence[str]]) -> list[list[str]]:
    """Delete every non-empty folder whose sub-tree matches another's, with its contents.

    Returns the paths of the remaining folders, parents before children and
    siblings in alphabetical order.
    """
    root = _build_tree(paths)
    groups: dict[str, list[_Folder]] = defaultdict(list)
    _signature(root, groups)
    for folders in groups.values():
        if len(folders) > 1:
            for folder in folders:
                folder.deleted = True

    result: list[list[str]] = []
    for child in root.sorted_children():
        if not child.deleted:
            _collect(child, [], result)
    return result