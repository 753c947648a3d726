"""Lending domain entities.

Provides:
- User: immutable identity with a premium flag
- Book: title, premium flag and current lifecycle state

A book's state is read-only from the outside. It only changes by applying a
BookTransition computed by patterns.book_states, which keeps every state
change inside the transition table.
"""

from __future__ import annotations

from dataclasses import dataclass

from patterns import book_states
from patterns.book_states import BookAction, BookState, BookTransition


@dataclass(frozen=True)
class User:
    """A library patron. Borrowing does not record who holds what."""

    name: str
    is_premium: bool = False


class Book:
    """A single book in the catalog.

    Titles are not unique; two books with the same title are distinct objects.
    """

    def __init__(self, title: str, is_premium: bool = False):
        self._title = title
        self._is_premium = is_premium
        self._state = BookState.AVAILABLE
        self._history: list[BookTransition] = []

    @classmethod
    def regular(cls, title: str) -> "Book":
        return cls(title, is_premium=False)

    @classmethod
    def premium(cls, title: str) -> "Book":
        return cls(title, is_premium=True)

    @property
    def title(self) -> str:
        return self._title

    @property
    def is_premium(self) -> bool:
        return self._is_premium

    @property
    def state(self) -> BookState:
        return self._state

    @property
    def history(self) -> tuple[BookTransition, ...]:
        """Transitions that changed this book's state, oldest first."""
        return tuple(self._history)

    @property
    def transition_count(self) -> int:
        """Number of state changes this book has gone through."""
        return len(self._history)

    def apply(self, transition: BookTransition) -> BookTransition:
        """Move the book to ``transition.to_state``.

        The transition is re-derived from the state machine for this book.
        Raises ValueError if it starts from a state other than the book's
        current one, was computed for a different book, or does not match
        what the transition table produces.
        """
        if transition.from_state is not self._state:
            raise ValueError(
                f"Cannot apply {transition.action.value} to '{self._title}': "
                f"transition starts from {transition.from_state.value}, "
                f"book is {self._state.value}"
            )
        if transition.title != self._title or transition.book_is_premium != self._is_premium:
            raise ValueError(
                f"Cannot apply {transition.action.value} to '{self._title}': "
                f"transition was computed for another book"
            )

        user = None
        if transition.user_name is not None:
            user = User(transition.user_name, is_premium=transition.user_is_premium)
        elif transition.action is not BookAction.RETURN:
            raise ValueError(f"Cannot apply {transition.action.value} to '{self._title}' without a user")

        expected = book_states.transition(
            self._state, transition.action, self, user,
            enforce_premium=transition.premium_enforced,
        )
        if transition != expected:
            raise ValueError(
                f"Cannot apply {transition.action.value} to '{self._title}': "
                f"{transition.from_state.value} -> {transition.to_state.value} "
                f"({transition.outcome.value}) is not a valid transition"
            )

        if transition.changed:
            self._history.append(transition)
        self._state = transition.to_state
        return transition

    def __repr__(self) -> str:
        kind = "premium" if self._is_premium else "regular"
        return f"Book({self._title!r}, {kind}, {self._state.value})"
