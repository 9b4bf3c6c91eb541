"""Unit tests for the book validation rule chains."""

import pytest

from src.bookstore.core.models import (
    BookAlreadyExistFailure,
    BookIdEmptyOrNullFailure,
    BookNameEmptyOrNullFailure,
    BookNotFoundFailure,
    BookNullFailure,
    Invalid,
    Valid,
)
from src.bookstore.core.services import BookRule, base_rules, is_blank, run_rules
from src.bookstore.entities.service.book import Book


class TestIsBlank:
    """Test the blank string predicate."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n", "\u2003", "\u3000\x1f"])
    def test_blank_values(self, value):
        """Should treat None and whitespace-only strings as blank."""
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["a", " a ", "0", "\u00a0", "\u2007", " \u202f "])
    def test_non_blank_values(self, value):
        """Should accept visible characters and non-breaking spaces."""
        assert not is_blank(value)


class TestRunRules:
    """Test rule chain evaluation."""

    def test_valid_book_passes_base_rules(self):
        """Should return Valid carrying the book."""
        book = Book(id="1", name="Dune")

        outcome = run_rules(book, base_rules())

        assert outcome == Valid(book=book)
        assert outcome.is_valid
        assert outcome.reason is None

    @pytest.mark.parametrize(
        "book, failure",
        [
            (None, BookNullFailure()),
            (Book(id=None, name=None), BookIdEmptyOrNullFailure()),
            (Book(id="  ", name="Dune"), BookIdEmptyOrNullFailure()),
            (Book(id="1", name=None), BookNameEmptyOrNullFailure()),
            (Book(id="1", name=""), BookNameEmptyOrNullFailure()),
        ],
    )
    def test_first_violation_wins(self, book, failure):
        """Should report null before id before name."""
        outcome = run_rules(book, base_rules())

        assert isinstance(outcome, Invalid)
        assert not outcome.is_valid
        assert outcome.book == book
        assert outcome.reason == failure

    def test_later_rules_are_not_evaluated(self):
        """Should stop at the first violated rule."""
        calls = []

        def track(book):
            calls.append(book)
            return True

        rules = [*base_rules(), BookRule(track, BookNotFoundFailure)]

        run_rules(Book(id="", name="Dune"), rules)
        assert calls == []

        run_rules(Book(id="1", name="Dune"), rules)
        assert len(calls) == 1

    def test_existence_rule_runs_last(self):
        """Should only reach the existence rule for well-formed books."""
        rules = [*base_rules(), BookRule(lambda book: True, BookAlreadyExistFailure)]

        assert run_rules(Book(id="1", name=" "), rules).reason == BookNameEmptyOrNullFailure()
        assert run_rules(Book(id="1", name="Dune"), rules).reason == BookAlreadyExistFailure()
