"""Tests for Trie."""

import copy

import pytest

from dasel import InvalidCharacterError, Trie

WORDS = [
    "hello",
    "Octopus",
    "Octogonal",
    "ornitorrinco",
    "Advice",
    "files",
    "file",
    "Supercalifragilisticexpialidocious",
    "super",
    "supra",
    "north",
]

# --- Fixtures ---


@pytest.fixture
def trie() -> Trie:
    """Trie holding the eleven WORDS."""
    t = Trie()
    for word in WORDS:
        t.insert_word(word)
    return t


class TestInsert:
    def test_empty_initially(self) -> None:
        t = Trie()
        assert t.dictionary_size == 0
        assert len(t) == 0
        assert t.count_nodes() == 1

    def test_insert_words(self, trie: Trie) -> None:
        assert trie.dictionary_size == 11
        trie.insert_word("calamari")
        assert trie.dictionary_size == 12

    def test_round_trip(self) -> None:
        t = Trie()
        t.insert_word("hello")
        assert t.is_word("hello")
        assert t.is_word("HELLO")
        assert t.is_prefix("hell")
        assert not t.is_word("hell")

    def test_duplicate_insert_counts_again(self) -> None:
        t = Trie()
        t.insert_word("word")
        t.insert_word("WORD")
        assert t.dictionary_size == 2
        assert t.count_nodes() == 5

    def test_shared_prefix_nodes_are_reused(self) -> None:
        t = Trie()
        t.insert_word("file")
        t.insert_word("files")
        # root + f, i, l, e, s
        assert t.count_nodes() == 6

    def test_nodes_store_lowercase_content_and_parent(self) -> None:
        t = Trie()
        t.insert_word("Ab")
        node = t.search_word("ab")
        assert node is not None
        assert node.content == "b"
        assert node.parent is not None
        assert node.parent.content == "a"
        assert node.parent.parent is t.root
        assert t.root.parent is None

    def test_empty_word_marks_root(self) -> None:
        t = Trie()
        t.insert_word("")
        assert t.is_word("")
        assert t.root.is_terminal


class TestSearch:
    def test_whole_words(self, trie: Trie) -> None:
        assert trie.is_word("file")
        assert trie.is_word("aDvIcE")
        assert trie.is_word("supercalifraGILIsticexpialidocious")
        assert not trie.is_word("friend")
        assert not trie.is_word("supr")
        assert not trie.is_word("superc")

    def test_prefixes(self, trie: Trie) -> None:
        assert trie.is_prefix("super")
        assert trie.is_prefix("sup")
        assert trie.is_prefix("ornito")
        assert trie.is_prefix("no")
        assert not trie.is_prefix("Amelia")
        assert not trie.is_prefix("melon")
        assert not trie.is_prefix("calamarido")
        assert not trie.is_prefix("orth")

    def test_search_word_returns_node(self, trie: Trie) -> None:
        node = trie.search_word("sup", whole_word=False)
        assert node is not None
        assert node.content == "p"
        assert node.num_children == 2
        assert trie.search_word("sup") is None

    def test_contains(self, trie: Trie) -> None:
        assert "north" in trie
        assert "nort" not in trie
        assert 42 not in trie


class TestRemove:
    def test_remove_word(self, trie: Trie) -> None:
        word = "supercalifraGILIsticexpialidocious"
        assert trie.is_prefix("superca")
        trie.remove_word(word)
        assert not trie.is_word(word)
        assert not trie.is_prefix("superca")
        assert trie.is_word("super")
        assert trie.is_prefix("sup")
        assert trie.dictionary_size == 10

    def test_remove_missing_word_is_noop(self, trie: Trie) -> None:
        nodes = trie.count_nodes()
        trie.remove_word("noThere")
        trie.remove_word("sup")
        assert trie.dictionary_size == 11
        assert trie.count_nodes() == nodes

    def test_shared_prefix_survives(self) -> None:
        t = Trie()
        t.insert_word("super")
        t.insert_word("supra")
        t.remove_word("super")
        assert not t.is_word("super")
        assert not t.is_prefix("supe")
        assert t.is_word("supra")
        assert t.is_prefix("sup")
        # root + s, u, p, r, a
        assert t.count_nodes() == 6

    def test_word_that_is_a_prefix_keeps_its_nodes(self) -> None:
        t = Trie()
        t.insert_word("file")
        t.insert_word("files")
        t.remove_word("file")
        assert not t.is_word("file")
        assert t.is_word("files")
        assert t.count_nodes() == 6

    def test_prune_stops_at_shorter_word(self) -> None:
        t = Trie()
        t.insert_word("file")
        t.insert_word("files")
        t.remove_word("files")
        assert t.is_word("file")
        assert t.count_nodes() == 5

    def test_remove_last_word_empties_trie(self) -> None:
        t = Trie()
        t.insert_word("abc")
        t.remove_word("abc")
        assert t.count_nodes() == 1
        assert t.root.num_children == 0
        assert t.dictionary_size == 0


class TestInvalidCharacters:
    @pytest.mark.parametrize("word", ["hello world", "naïve", "abc1", "x-ray"])
    def test_insert_raises(self, word: str) -> None:
        t = Trie()
        with pytest.raises(InvalidCharacterError):
            t.insert_word(word)
        assert t.dictionary_size == 0
        assert t.count_nodes() == 1

    def test_search_and_remove_raise(self, trie: Trie) -> None:
        with pytest.raises(InvalidCharacterError, match="'3'"):
            trie.is_word("h3llo")
        with pytest.raises(InvalidCharacterError):
            trie.is_prefix("no!")
        with pytest.raises(InvalidCharacterError):
            trie.remove_word("super man")

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="not in the alphabet"):
            Trie().insert_word("?")

    def test_custom_alphabet(self) -> None:
        t = Trie("acgt")
        t.insert_word("GATTACA")
        assert t.is_word("gattaca")
        with pytest.raises(InvalidCharacterError):
            t.insert_word("gabba")

    @pytest.mark.parametrize("alphabet", ["", "abca", "ABC"])
    def test_bad_alphabet(self, alphabet: str) -> None:
        with pytest.raises(ValueError, match="Alphabet"):
            Trie(alphabet)


class TestCopy:
    def test_copy_is_deep(self, trie: Trie) -> None:
        clone = copy.deepcopy(trie)
        clone.remove_word("supra")
        clone.insert_word("zebra")
        assert trie.is_word("supra")
        assert not trie.is_prefix("z")
        assert clone.dictionary_size == trie.dictionary_size
        assert clone.count_nodes() != trie.count_nodes()

    def test_copy_has_own_parent_links(self, trie: Trie) -> None:
        clone = trie.copy()
        node = clone.search_word("north")
        assert node is not None
        while node.parent is not None:
            node = node.parent
        assert node is clone.root
