"""Text held as a doubly linked list of string blobs."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

BLOB_SIZE = 8


@dataclass(eq=False)
class Blob:
    """One node of a :class:`BlobList`: a piece of text and its neighbours."""

    data: str
    prev: Blob | None = field(default=None, repr=False)
    next: Blob | None = field(default=None, repr=False)


class BlobList:
    """A doubly linked list of text blobs that can be split and joined."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._head: Blob | None = None
        self._tail: Blob | None = None
        self._size = 0
        for data in items:
            self.append(data)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __getitem__(self, n: int) -> str:
        index = operator.index(n)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("blob index out of range")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, data: str) -> None:
        """Add a blob holding ``data`` at the end of the list."""
        node = Blob(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node(self, n: int) -> Blob:
        """Return the ``n``-th blob counting from 1, clamped to the list."""
        position = min(max(n, 1), self._size)
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def split(self, at: int, n: int) -> None:
        """Split blob ``n`` (counted from 1) in two before character ``at``.

        ``at`` below 1 becomes 1 and ``at`` past the end becomes the last
        character; ``n`` past the end means the last blob. A blob too short
        to split is left alone.
        """
        if not self._size:
            raise IndexError("split on an empty blob list")
        at = max(at, 1)
        node = self._node(n)
        length = len(node.data)
        if at >= length:
            at = length - 1
        if at <= 0:
            return
        new = Blob(node.data[at:], prev=node, next=node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        node.data = node.data[:at]
        self._size += 1

    def join(self, n: int) -> None:
        """Append blob ``n + 1`` to blob ``n`` (counted from 1) and drop it.

        Nothing happens when ``n`` is the last blob or beyond.
        """
        if n >= self._size:
            return
        node = self._node(n)
        following = node.next
        node.data += following.data
        node.next = following.next
        if following.next is None:
            self._tail = node
        else:
            following.next.prev = node
        self._size -= 1

    def text(self) -> str:
        """Return all blobs concatenated."""
        return "".join(self)

    def render(self, max_lines: int | None = None) -> str:
        """Return the whole text, or only its first ``max_lines`` lines."""
        full = self.text()
        if max_lines is None:
            return full
        if max_lines < 0:
            raise ValueError("max_lines must not be negative")
        return "".join(full.splitlines(keepends=True)[:max_lines])


def chunk(text: str, size: int = BLOB_SIZE) -> list[str]:
    """Cut ``text`` into pieces of ``size`` characters; the last may be shorter."""
    if size <= 0:
        raise ValueError("blob size must be positive")
    if not text:
        return [""]
    return [text[start:start + size] for start in range(0, len(text), size)]


def load_text(text: str, blob_size: int | None = BLOB_SIZE) -> BlobList:
    """Build a blob list from ``text``.

    With ``blob_size`` set, each line (newline included) is cut into blobs
    of that many characters; with ``None`` every line becomes one blob.
    """
    blobs = BlobList()
    for line in text.splitlines(keepends=True):
        pieces = [line] if blob_size is None else chunk(line, blob_size)
        for piece in pieces:
            blobs.append(piece)
    return blobs


def load_file(path: str | PathLike[str], blob_size: int | None = BLOB_SIZE) -> BlobList:
    """Read the file at ``path`` and build a blob list as :func:`load_text` does."""
    with open(path, encoding="utf-8", newline="") as handle:
        return load_text(handle.read(), blob_size)