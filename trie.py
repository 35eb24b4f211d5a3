# trie.py
# R-way trie symbol table: one child slot per alphabet symbol.
# Nodes are created lazily on put and pruned bottom-up on delete.

import sys

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union

EXTENDED_ASCII = 256
ENGLISH_ALPHABET = 26
LOWER_CASE_OFFSET = 97
UPPER_CASE_OFFSET = 65

WILDCARD = "."

V = TypeVar("V")


class InvalidKeyError(ValueError):
    """Raised when a key argument is None (the empty string is a valid key)."""


class SymbolRangeError(IndexError):
    """Raised when a symbol falls outside the trie's alphabet."""


class Node:
    """Single trie cell: an optional value and ``radix`` child slots."""

    __slots__ = ("value", "next")

    def __init__(self, radix: int):
        self.value = None
        self.next: List[Optional["Node"]] = [None] * radix

    def has_children(self) -> bool:
        for child in self.next:
            if child is not None:
                return True
        return False


class Trie(Generic[V]):
    """
    Symbol table keyed by strings over a fixed alphabet.
      - Trie() -> extended ASCII (radix 256, offset 0)
      - Trie(26, 'a') -> lowercase English
      - get / contains / put / delete
      - longest_prefix_of / keys / keys_with_prefix / keys_that_match
      - size / is_empty
    None keys are rejected; put(key, None) removes the key.
    """

    def __init__(self, radix: int = EXTENDED_ASCII, radix_offset: Union[int, str] = 0):
        if isinstance(radix_offset, str):
            if len(radix_offset) != 1:
                raise ValueError(f"radix offset must be a single symbol, got {radix_offset!r}")
            radix_offset = ord(radix_offset)
        if isinstance(radix, bool) or not isinstance(radix, int) or radix <= 0:
            raise ValueError(f"radix must be a positive integer, got {radix!r}")
        if isinstance(radix_offset, bool) or not isinstance(radix_offset, int) or radix_offset < 0:
            raise ValueError(f"radix offset must be a non-negative integer, got {radix_offset!r}")
        if radix_offset + radix > sys.maxunicode + 1:
            raise ValueError(
                f"alphabet [{radix_offset}, {radix_offset + radix}) exceeds the Unicode code point range"
            )
        self.radix = radix
        self.radix_offset = radix_offset
        self._root: Optional[Node] = None
        self._size = 0

    # ---------- Public API ----------
    def get(self, key: str) -> Optional[V]:
        """Value paired with ``key``, or None if the key is absent."""
        self._check_key(key)
        node = self._walk(key)
        if node is None:
            return None
        return node.value

    def contains(self, key: str) -> bool:
        return self.get(key) is not None

    def put(self, key: str, value: Optional[V]) -> None:
        """
        Insert or overwrite ``key``. A None value removes the key instead,
        so put never creates a key without a value.
        """
        self._check_key(key)
        if value is None:
            self.delete(key)
            return
        if self._root is None:
            self._root = Node(self.radix)
        node = self._root
        for i in self._indices(key):
            nxt = node.next[i]
            if nxt is None:
                nxt = Node(self.radix)
                node.next[i] = nxt
            node = nxt
        if node.value is None:
            self._size += 1
        node.value = value

    def delete(self, key: str) -> None:
        """
        Remove ``key`` and prune every node left without a value or
        children on the way back up. Absent keys are a no-op.
        """
        self._check_key(key)
        if self._root is None:
            return
        # path[d] is the node at depth d; slots[d] the child index taken from it
        path = [self._root]
        slots = self._indices(key)
        for i in slots:
            nxt = path[-1].next[i]
            if nxt is None:
                return
            path.append(nxt)
        node = path[-1]
        if node.value is None:
            return
        node.value = None
        self._size -= 1

        depth = len(slots)
        while depth >= 0:
            node = path[depth]
            if node.value is not None or node.has_children():
                break
            if depth == 0:
                self._root = None
            else:
                path[depth - 1].next[slots[depth - 1]] = None
            depth -= 1

    def longest_prefix_of(self, s: str) -> Optional[str]:
        """
        Longest key that is a prefix of ``s``, or None when no key is
        (not even the empty string).
        """
        if s is None:
            return None
        indices = self._indices(s)
        best = -1
        node = self._root
        depth = 0
        while node is not None:
            if node.value is not None:
                best = depth
            if depth == len(indices):
                break
            node = node.next[indices[depth]]
            depth += 1
        if best == -1:
            return None
        return s[:best]

    def keys(self) -> List[str]:
        return self.keys_with_prefix("")

    def keys_with_prefix(self, s: str) -> List[str]:
        """All keys starting with ``s``, in ascending symbol-code order."""
        keys: List[str] = []
        if s is None:
            return keys
        node = self._walk(s)
        if node is None:
            return keys
        self._collect(node, list(s), keys)
        return keys

    def keys_that_match(self, pattern: str) -> List[str]:
        """All keys of len(pattern) where '.' matches any single symbol."""
        keys: List[str] = []
        if pattern is None:
            return keys
        for ch in pattern:
            if ch != WILDCARD:
                self._index(ch)
        self._collect_match(self._root, pattern, keys)
        return keys

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def items(self) -> List[Tuple[str, V]]:
        return [(key, self.get(key)) for key in self.keys()]

    # ---------- Python protocols ----------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        if key is None:
            return False
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, key: str) -> V:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.contains(key):
            raise KeyError(key)
        self.delete(key)

    def __repr__(self) -> str:
        return f"Trie(radix={self.radix}, radix_offset={self.radix_offset}, size={self._size})"

    # ---------- Helpers ----------
    @staticmethod
    def _check_key(key) -> None:
        if key is None:
            raise InvalidKeyError("the None key is unsupported")

    def _index(self, ch: str) -> int:
        i = ord(ch) - self.radix_offset
        if i < 0 or i >= self.radix:
            raise SymbolRangeError(
                f"symbol {ch!r} (code {ord(ch)}) is outside the alphabet "
                f"[{self.radix_offset}, {self.radix_offset + self.radix})"
            )
        return i

    def _indices(self, s: str) -> List[int]:
        """Child indices for every symbol of ``s``; validates before any walk."""
        return [self._index(ch) for ch in s]

    def _walk(self, s: str) -> Optional[Node]:
        """Return the node reached after consuming s, or None if no such path."""
        node = self._root
        for i in self._indices(s):
            if node is None:
                return None
            node = node.next[i]
        return node

    def _next_child(self, node: Node, i: int) -> int:
        """Index of the first present child at or after ``i``, or ``radix``."""
        while i < self.radix and node.next[i] is None:
            i += 1
        return i

    def _collect(self, node: Node, prefix: List[str], keys: List[str]) -> None:
        # stack[d] holds (node at depth d below the start, next child index to try);
        # prefix grows by one symbol per frame above the first
        base = len(prefix)
        if node.value is not None:
            keys.append("".join(prefix))
        stack = [(node, 0)]
        while stack:
            assert len(prefix) == base + len(stack) - 1
            node, i = stack[-1]
            i = self._next_child(node, i)
            if i == self.radix:
                stack.pop()
                if stack:
                    prefix.pop()
                continue
            stack[-1] = (node, i + 1)
            child = node.next[i]
            prefix.append(chr(self.radix_offset + i))
            if child.value is not None:
                keys.append("".join(prefix))
            stack.append((child, 0))
        assert len(prefix) == base

    def _collect_match(self, root: Optional[Node], pattern: str, keys: List[str]) -> None:
        if root is None:
            return
        if not pattern:
            if root.value is not None:
                keys.append("")
            return
        prefix: List[str] = []
        stack = [(root, 0)]
        while stack:
            depth = len(stack) - 1
            assert len(prefix) == depth
            node, i = stack[-1]
            ch = pattern[depth]
            if ch == WILDCARD:
                i = self._next_child(node, i)
            else:
                j = self._index(ch)
                i = j if i <= j and node.next[j] is not None else self.radix
            if i >= self.radix:
                stack.pop()
                if stack:
                    prefix.pop()
                continue
            stack[-1] = (node, i + 1)
            child = node.next[i]
            prefix.append(chr(self.radix_offset + i))
            if depth + 1 == len(pattern):
                if child.value is not None:
                    keys.append("".join(prefix))
                prefix.pop()
            else:
                stack.append((child, 0))
