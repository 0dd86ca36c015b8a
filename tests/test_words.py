"""Tests for shuffling, word list loading and the word queue."""

import random
from collections import Counter
from pathlib import Path

import pytest

import src.wordgame
from src.wordgame import PLACEHOLDER, WordQueue, load_wordlist, shuffle
from src.wordgame.words import DEFAULT_WORDLIST


class TestShuffle:
    """Tests for the Fisher-Yates shuffle."""

    @pytest.mark.parametrize("items", [
        [],
        ["solo"],
        ["a", "b", "c", "d", "e", "f", "g"],
        ["dup", "dup", "x", "y", "dup"],
    ])
    def test_is_a_permutation(self, items):
        """Shuffle keeps length and the multiset of elements."""
        result = shuffle(items, random.Random(7))
        assert len(result) == len(items)
        assert Counter(result) == Counter(items)

    def test_does_not_mutate_input(self):
        """The input list is left as it was."""
        items = list(range(20))
        shuffle(items, random.Random(1))
        assert items == list(range(20))

    def test_seeded_shuffle_is_deterministic(self):
        """Same seed gives the same order."""
        items = list(range(50))
        assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))

    def test_every_position_reachable(self):
        """Across many shuffles the first element lands in every slot."""
        rng = random.Random(3)
        positions = {shuffle(["x", "a", "b", "c"], rng).index("x") for _ in range(200)}
        assert positions == {0, 1, 2, 3}


class TestLoadWordlist:
    """Tests for reading the canonical word list."""

    def test_default_list_is_not_empty(self):
        words = load_wordlist()
        assert len(words) > 50
        assert all(w.strip() == w and w for w in words)

    def test_default_list_ships_inside_the_package(self):
        package_dir = Path(src.wordgame.__file__).parent
        assert DEFAULT_WORDLIST.is_file()
        assert DEFAULT_WORDLIST.parent.parent == package_dir

    def test_skips_blank_lines_comments_and_duplicates(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# header\npies\n\n  kot \npies\nryba\n", encoding="utf-8")

        assert load_wordlist(path) == ["pies", "kot", "ryba"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_wordlist(tmp_path / "nope.txt")


class TestWordQueue:
    """Tests for the replenishable word queue."""

    def test_current_is_from_canonical_list(self):
        queue = WordQueue(["alfa", "beta", "gamma"], random.Random(0))
        assert queue.current() in {"alfa", "beta", "gamma"}
        assert queue.index == 0

    def test_advance_moves_cursor(self):
        queue = WordQueue(["alfa", "beta", "gamma"], random.Random(0))
        first = queue.words
        queue.advance()
        assert queue.index == 1
        assert queue.current() == first[1]

    def test_wraparound_with_two_words(self):
        """After two advances a 2-word queue still yields a real word."""
        queue = WordQueue(["alfa", "beta"], random.Random(5))
        queue.advance()
        queue.advance()

        assert not queue.is_empty()
        assert queue.index == 0
        assert queue.current() in {"alfa", "beta"}
        assert queue.current() != PLACEHOLDER

    def test_refill_keeps_unseen_words(self):
        """Refill reshuffles canonical words plus the ones left unused."""
        queue = WordQueue(["alfa", "beta", "gamma"], random.Random(2))
        for _ in range(3):
            queue.advance()
        assert Counter(queue.words) == Counter(["alfa", "beta", "gamma"])

    def test_single_word_queue_repeats(self):
        queue = WordQueue(["jedyne"], random.Random(0))
        for _ in range(5):
            queue.advance()
            assert queue.current() == "jedyne"

    def test_empty_canonical_gives_placeholder(self):
        queue = WordQueue([], random.Random(0))
        assert queue.is_empty()
        assert queue.current() == PLACEHOLDER

        queue.advance()
        assert queue.index == 0
        assert queue.current() == PLACEHOLDER

    def test_remaining_lists_words_after_cursor(self):
        queue = WordQueue(["a", "b", "c", "d"], random.Random(9))
        order = queue.words
        queue.advance()
        assert queue.remaining() == order[2:]

    def test_reshuffle_restores_canonical_set(self):
        queue = WordQueue(["a", "b", "c", "d"], random.Random(9))
        queue.advance()
        queue.advance()
        queue.reshuffle()
        assert queue.index == 0
        assert sorted(queue.words) == ["a", "b", "c", "d"]
