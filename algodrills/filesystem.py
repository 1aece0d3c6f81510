"""An in-memory file system of directories and appendable files."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    name: str
    content: str = ""
    children: dict[str, _Node] = field(default_factory=dict)

    @property
    def is_file(self) -> bool:
        return bool(self.content)


def _parts(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


class FileSystem:
    """A tree of directories and files addressed by slash-separated paths.

    Looking a path up creates any missing directories along it, and a walk
    stops at the first file it meets.
    """

    def __init__(self) -> None:
        self._root = _Node("")

    def _find(self, path: str) -> _Node:
        node = self._root
        for part in _parts(path):
            child = node.children.get(part)
            if child is None:
                child = node.children[part] = _Node(part)
            node = child
            if node.is_file:
                break
        return node

    def ls(self, path: str) -> list[str]:
        """The file's own name, or the sorted names inside a directory."""
        node = self._find(path)
        if node.is_file:
            return [node.name]
        return sorted(node.children)

    def mkdir(self, path: str) -> None:
        """Create the directory at ``path`` and any missing parents."""
        self._find(path)

    def add_content_to_file(self, path: str, content: str) -> None:
        """Append ``content`` to the file at ``path``, creating it if needed."""
        self._find(path).content += content

    def read_content_from_file(self, path: str) -> str:
        """The whole content of the file at ``path``."""
        return self._find(path).content