from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RosterOverride:
    """Explicit include/exclude lists for one event or one recurring series.

    A user is never in both lists at the same scope: adding to one side
    clears the other.
    """

    include: frozenset[str] = field(default_factory=frozenset)
    exclude: frozenset[str] = field(default_factory=frozenset)

    def with_include(self, user_id: str) -> "RosterOverride":
        return RosterOverride(include=self.include | {user_id}, exclude=self.exclude - {user_id})

    def with_exclude(self, user_id: str) -> "RosterOverride":
        return RosterOverride(include=self.include - {user_id}, exclude=self.exclude | {user_id})

    def without_include(self, user_id: str) -> "RosterOverride":
        return RosterOverride(include=self.include - {user_id}, exclude=self.exclude)

    def without_exclude(self, user_id: str) -> "RosterOverride":
        return RosterOverride(include=self.include, exclude=self.exclude - {user_id})


EMPTY_OVERRIDE = RosterOverride()
