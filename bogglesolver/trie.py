from typing import Iterable, Self

LETTER_A = ord("A")

#                  1, 2, 3, 4, 5, 6, 7,  8,     9..25
SCORES = tuple([0, 0, 0, 1, 1, 2, 3, 5, 11] + [11 for _ in range(9, 26)])
assert len(SCORES) == 26
MIN_WORD_LENGTH = 3


def letter_index(letter: str) -> int:
    if len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"Expected a single letter A-Z, got {letter!r}")
    return ord(letter) - LETTER_A


def score_for_length(length: int) -> int:
    """Points for a word of this length; 0 means it's too short to count."""
    return SCORES[min(length, len(SCORES) - 1)]


class TrieNode:
    _children: list[Self | None]
    score: int

    def __init__(self):
        self.score = 0
        self._children = [None] * 26

    def descend(self, i: int):
        return self._children[i]

    def child(self, letter: str):
        return self._children[letter_index(letter)]

    def is_word(self):
        return self.score > 0

    # ---

    def add_word(self, word: str, score: int) -> Self:
        node = self
        for letter in word:
            c = letter_index(letter)
            if node._children[c] is None:
                node._children[c] = TrieNode()
            node = node._children[c]
        node.score = score
        return node

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)


class PrefixDictionary:
    """The word list, stored as a 26-ary trie with a score on each word.

    Only words of three or more letters are kept. Every stored word has a
    score of at least 1, so a score of 0 always means "not a word".
    """

    _root: TrieNode | None

    def __init__(self, words: Iterable[str] = ()):
        self._root = None
        for word in words:
            score = score_for_length(len(word))
            if score == 0:
                continue
            self._put(word, score)

    def _put(self, word: str, score: int):
        assert score >= 1
        if self._root is None:
            self._root = TrieNode()
        self._root.add_word(word, score)

    def _find(self, key: str) -> TrieNode | None:
        node = self._root
        for letter in key:
            if node is None:
                return None
            node = node.child(letter)
        return node

    def root_handle(self) -> TrieNode | None:
        return self._root

    @staticmethod
    def child_after(node: TrieNode | None, letter: str) -> TrieNode | None:
        if node is None:
            return None
        return node.child(letter)

    def score_of(self, word: str | None) -> int:
        if not word:
            return 0
        node = self._find(word)
        if node is None:
            return 0
        return node.score

    def contains(self, word: str | None) -> bool:
        return self.score_of(word) > 0

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def keys(self) -> list[str]:
        return self.keys_with_prefix("")

    def keys_with_prefix(self, prefix: str | None) -> list[str]:
        """All stored words starting with prefix, in alphabetical order."""
        if prefix is None:
            return []
        out = []
        collect_keys(self._find(prefix), prefix, out)
        return out

    def size(self) -> int:
        return self._root.size() if self._root else 0

    def num_nodes(self) -> int:
        return self._root.num_nodes() if self._root else 0


def collect_keys(t: TrieNode | None, prefix: str, out: list[str]):
    if t is None:
        return
    if t.is_word():
        out.append(prefix)
    for i, child in enumerate(t._children):
        if child:
            collect_keys(child, prefix + chr(i + LETTER_A), out)


def is_dictionary_word(word: str):
    return word.isascii() and word.isalpha() and word.isupper()


def load_dictionary(dict_input: str) -> PrefixDictionary:
    """Read a word list with one word per line. Case is ignored."""
    words = []
    with open(dict_input) as f:
        for line in f:
            word = line.strip().upper()
            if is_dictionary_word(word):
                words.append(word)
    return PrefixDictionary(words)
