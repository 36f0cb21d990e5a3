"""Trie (prefix dictionary) over a fixed lowercase alphabet.

Each node stores one character and owns one child slot per alphabet letter. Parent
links are weak references used only to prune nodes upward when a word is removed.
Lookups are case-insensitive: every character is lowercased before use, and a
character outside the alphabet raises ``InvalidCharacterError``.
"""

from __future__ import annotations

import logging
import weakref
from string import ascii_lowercase

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = ascii_lowercase


class InvalidCharacterError(ValueError):
    """Raised when a word contains a character outside the trie's alphabet."""

    def __init__(self, char: str, alphabet: str) -> None:
        self.char = char
        self.alphabet = alphabet
        super().__init__(f"Character {char!r} is not in the alphabet '{alphabet}'")


class TrieNode:
    """A single character of one or more words.

    The root node has no content and no parent.
    """

    __slots__ = ("__weakref__", "_parent", "children", "content", "is_terminal", "num_children")

    def __init__(self, size: int, content: str = "", parent: TrieNode | None = None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None
        self.content = content
        self.children: list[TrieNode | None] = [None] * size
        self.num_children = 0
        self.is_terminal = False

    def __repr__(self) -> str:
        return f"TrieNode(content={self.content!r}, children={self.num_children}, terminal={self.is_terminal})"

    @property
    def parent(self) -> TrieNode | None:
        """The parent node, or None for the root."""
        return self._parent() if self._parent is not None else None


class Trie:
    """Dictionary of words sharing prefix nodes.

    ``dictionary_size`` counts insertions minus successful removals: inserting a
    word that is already present increments it again.

    Example:
        >>> trie = Trie()
        >>> trie.insert_word("Hello")
        >>> trie.is_word("hello"), trie.is_prefix("HEL"), trie.is_word("hell")
        (True, True, False)

    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET) -> None:
        if not alphabet or len(set(alphabet)) != len(alphabet) or alphabet != alphabet.lower():
            msg = f"Alphabet must be a non-empty string of distinct lowercase characters, got {alphabet!r}"
            raise ValueError(msg)
        self._alphabet = alphabet
        self._slots = {char: slot for slot, char in enumerate(alphabet)}
        self._root = TrieNode(len(alphabet))
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __copy__(self) -> Trie:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Trie:
        return self.copy()

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def dictionary_size(self) -> int:
        """Number of insertions minus number of successful removals."""
        return self._size

    def _slots_for(self, word: str) -> list[int]:
        """Map every character of ``word`` to its child slot.

        Raises:
            InvalidCharacterError: If a character is not in the alphabet.

        """
        slots: list[int] = []
        for char in word:
            slot = self._slots.get(char.lower())
            if slot is None:
                raise InvalidCharacterError(char, self._alphabet)
            slots.append(slot)
        return slots

    def insert_word(self, word: str) -> None:
        """Insert a word, creating nodes only for the part not already in the trie.

        The word is checked in full before any node is created, so an invalid
        character leaves the trie unchanged.

        Raises:
            InvalidCharacterError: If a character is not in the alphabet.

        """
        node = self._root
        for slot in self._slots_for(word):
            child = node.children[slot]
            if child is None:
                child = TrieNode(len(self._alphabet), self._alphabet[slot], node)
                node.children[slot] = child
                node.num_children += 1
            node = child
        node.is_terminal = True
        self._size += 1

    def remove_word(self, word: str) -> None:
        """Remove a word and prune the nodes no other word needs.

        Walks upward from the last character, deleting each node that is neither the
        end of another word nor the parent of remaining children. No-op if the word
        is not in the trie.

        Raises:
            InvalidCharacterError: If a character is not in the alphabet.

        """
        node = self.search_word(word)
        if node is None:
            return

        node.is_terminal = False
        self._size -= 1

        pruned = 0
        while node is not self._root and not node.is_terminal and node.num_children == 0:
            parent = node.parent
            if parent is None:
                break
            parent.children[self._slots[node.content]] = None
            parent.num_children -= 1
            pruned += 1
            node = parent
        logger.debug("Removed %r, pruned %d nodes", word, pruned)

    def search_word(self, word: str, whole_word: bool = True) -> TrieNode | None:  # noqa: FBT001, FBT002
        """Find the node where ``word`` ends.

        Args:
            word: Word or prefix to look up, case-insensitive.
            whole_word: If True, the node must end an inserted word. If False, any
                prefix of an inserted word matches.

        Returns:
            The last node of the path, or None if there is no match.

        Raises:
            InvalidCharacterError: If a character is not in the alphabet.

        """
        node = self._root
        for slot in self._slots_for(word):
            child = node.children[slot]
            if child is None:
                return None
            node = child
        if whole_word and not node.is_terminal:
            return None
        return node

    def is_prefix(self, prefix: str) -> bool:
        """Check whether ``prefix`` starts (or is) an inserted word."""
        return self.search_word(prefix, whole_word=False) is not None

    def is_word(self, word: str) -> bool:
        """Check whether ``word`` was inserted and not removed since."""
        return self.search_word(word, whole_word=True) is not None

    def count_nodes(self) -> int:
        """Total number of nodes, root included."""
        total = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(child for child in node.children if child is not None)
        return total

    def copy(self) -> Trie:
        """Return a deep copy with its own nodes and parent links."""
        clone = Trie(self._alphabet)
        clone._size = self._size
        size = len(self._alphabet)

        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            target.is_terminal = source.is_terminal
            for slot, child in enumerate(source.children):
                if child is None:
                    continue
                twin = TrieNode(size, child.content, target)
                target.children[slot] = twin
                target.num_children += 1
                stack.append((child, twin))
        return clone
