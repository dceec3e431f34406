from typing import Iterable

from bogglesolver.board import QU_TILE, Board, spell
from bogglesolver.neighbors import neighbors_for
from bogglesolver.trie import PrefixDictionary, TrieNode


class BoardSolver:
    """Finds every dictionary word that can be traced on a board.

    The search walks the trie in step with a depth-first traversal of the
    board, so a path is abandoned as soon as its letters stop being a prefix
    of some dictionary word.

    The dictionary is never modified, so one solver can be reused for any
    number of boards.
    """

    _dictionary: PrefixDictionary

    def __init__(self, dictionary: PrefixDictionary):
        self._dictionary = dictionary

    @staticmethod
    def from_words(words: Iterable[str]) -> "BoardSolver":
        return BoardSolver(PrefixDictionary(words))

    @property
    def dictionary(self) -> PrefixDictionary:
        return self._dictionary

    def advance(self, node: TrieNode | None, letter: str) -> TrieNode | None:
        """Follow one tile's letters down the trie. The Q tile moves through Q, then U."""
        d = self._dictionary.child_after(node, letter)
        if letter == QU_TILE:
            d = self._dictionary.child_after(d, "U")
        return d

    def all_valid_words(self, board: Board) -> set[str]:
        words: set[str] = set()
        root = self._dictionary.root_handle()
        if root is None:
            return words

        cells = board.cells
        neighbors = neighbors_for(board.dims)
        used = [False] * len(cells)

        def do_dfs(i: int, prefix: str, t: TrieNode | None):
            if t is None or used[i]:
                return
            if t.is_word():
                words.add(prefix)
            used[i] = True
            for idx in neighbors[i]:
                cc = cells[idx]
                do_dfs(idx, prefix + spell(cc), self.advance(t, cc))
            used[i] = False

        for i, c in enumerate(cells):
            do_dfs(i, spell(c), self.advance(root, c))
        assert not any(used)
        return words

    def score_of(self, word: str | None) -> int:
        return self._dictionary.score_of(word)

    def score(self, board: Board) -> int:
        """Total points for every word on the board, each counted once."""
        return sum(self.score_of(word) for word in self.all_valid_words(board))
