import pytest

from src.team_attendance.team_attendance.attendance.factory import RateStrategyFactory
from src.team_attendance.team_attendance.attendance.model import CheckInCounts
from src.team_attendance.team_attendance.attendance.strategies.challenge_strategy import ChallengeRateStrategy
from src.team_attendance.team_attendance.attendance.strategies.report_strategy import ReportRateStrategy
from src.team_attendance.team_attendance.core.enums import RateMode
from src.team_attendance.team_attendance.core.exceptions import ValidationError


def test_factory_picks_strategy_by_mode():
    factory = RateStrategyFactory()
    assert isinstance(factory.for_mode(RateMode.CHALLENGE), ChallengeRateStrategy)
    assert isinstance(factory.for_mode("REPORT"), ReportRateStrategy)


def test_factory_rejects_unknown_mode():
    with pytest.raises(ValidationError):
        RateStrategyFactory().for_mode("SEASON")


def test_excused_counts_against_challenge_but_not_report():
    counts = CheckInCounts(on_time=2, late=1, absent=1, excused=1)
    factory = RateStrategyFactory()
    assert factory.for_mode(RateMode.REPORT).rate(counts) == 75.0
    assert factory.for_mode(RateMode.CHALLENGE).rate(counts) == 60.0


def test_empty_denominator_rates_zero():
    only_excused = CheckInCounts(excused=3)
    factory = RateStrategyFactory()
    assert factory.for_mode(RateMode.REPORT).rate(only_excused) == 0.0
    assert factory.for_mode(RateMode.CHALLENGE).rate(CheckInCounts()) == 0.0
