"""Location-grouped feedback buckets for a single scanned unit."""

from __future__ import annotations

from typing import Protocol

from gherkinics.model import UNLOCATED, LocationKey, Token

GroupedFeedback = list[tuple[LocationKey, tuple[str, ...]]]


class SupportsGroupedFeedback(Protocol):
    """Anything the report printer can read feedback from."""

    def all_grouped_by_location(self) -> GroupedFeedback: ...


class LocationFeedback:
    """Ordered multimap from location key to the messages recorded there.

    Messages keep insertion order within a key. Keys are always produced in
    ascending order, whatever order they were first used in.
    """

    def __init__(self) -> None:
        self._messages: dict[LocationKey, list[str]] = {}

    def record(self, location: LocationKey, message: str) -> None:
        """Append ``message`` to the bucket for ``location``."""
        if not isinstance(message, str):
            raise TypeError(f"Feedback message must be a string, got {type(message).__name__}")
        self._messages.setdefault(location, []).append(message)

    def all_grouped_by_location(self) -> GroupedFeedback:
        """Return ``(key, messages)`` pairs sorted by key."""
        return [(key, tuple(self._messages[key])) for key in sorted(self._messages)]

    def messages_at(self, location: LocationKey | Token | int | None) -> tuple[str, ...]:
        return tuple(self._messages.get(LocationKey.coerce(location), ()))

    @property
    def message_count(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, location: object) -> bool:
        return location in self._messages

    def __repr__(self) -> str:
        return f"LocationFeedback(locations={len(self)}, messages={self.message_count})"


class FeedbackCollector:
    """Routes diagnostics for one scanned unit into location buckets.

    The scan loop that owns the collector moves the cursor with
    ``set_current_location``; ``add`` files messages under whatever the cursor
    points at. ``add_at`` records against an explicit location and leaves the
    cursor alone.
    """

    def __init__(self, feedback: LocationFeedback | None = None) -> None:
        self._feedback = feedback if feedback is not None else LocationFeedback()
        self._current: LocationKey = UNLOCATED

    @property
    def feedback(self) -> LocationFeedback:
        return self._feedback

    @property
    def current_location(self) -> LocationKey:
        return self._current

    def set_current_location(self, token: Token | None) -> None:
        """Point the cursor at ``token``, or back to unit level when ``None``."""
        self._current = UNLOCATED if token is None else LocationKey.located(token.id)

    def add(self, message: str) -> None:
        self._feedback.record(self._current, message)

    def add_at(self, location: LocationKey | Token | int | None, message: str) -> None:
        self._feedback.record(LocationKey.coerce(location), message)

    def all_grouped_by_location(self) -> GroupedFeedback:
        return self._feedback.all_grouped_by_location()
