from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .model import EMPTY_OVERRIDE, RosterOverride

SetOp = Callable[[frozenset, frozenset], frozenset]


def _add(roster: frozenset, users: frozenset) -> frozenset:
    return roster | users


def _remove(roster: frozenset, users: frozenset) -> frozenset:
    return roster - users


@dataclass(frozen=True)
class OverrideRule:
    name: str
    op: SetOp
    users: frozenset


def override_rules(
    *,
    series_override: Optional[RosterOverride],
    event_override: Optional[RosterOverride],
    in_series: bool,
) -> list[OverrideRule]:
    """Precedence-ordered rules; later rules win over earlier ones.

    Event-level decisions are more specific than series-level ones, so they
    are applied last.
    """
    series = series_override if (in_series and series_override) else EMPTY_OVERRIDE
    event = event_override or EMPTY_OVERRIDE
    return [
        OverrideRule("series_include", _add, series.include),
        OverrideRule("series_exclude", _remove, series.exclude),
        OverrideRule("event_include", _add, event.include),
        OverrideRule("event_exclude", _remove, event.exclude),
    ]


def effective_roster(
    base_roster: Iterable[str],
    *,
    series_override: Optional[RosterOverride] = None,
    event_override: Optional[RosterOverride] = None,
    in_series: bool = True,
) -> frozenset[str]:
    """Roster of one event occurrence after all overrides are applied."""
    roster = frozenset(base_roster)
    for rule in override_rules(series_override=series_override, event_override=event_override, in_series=in_series):
        roster = rule.op(roster, rule.users)
    return roster


def listed_overrides(
    event_users: Iterable[str],
    series_users: Iterable[str],
) -> list[str]:
    """Users shown on an event's include (or exclude) list.

    Event rows come first; series rows are inherited unless the same user
    already has an event row.
    """
    listed = list(dict.fromkeys(event_users))
    seen = set(listed)
    listed.extend(u for u in dict.fromkeys(series_users) if u not in seen)
    return listed
