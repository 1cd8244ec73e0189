"""Unit tests for structural anomaly checks."""

from phishscope.analyzers.behavioral_analyzer import BehavioralAnalyzer
from phishscope.config.settings import Settings
from phishscope.schemas.email import EmailData


class TestBehavioralAnalyzer:

    def setup_method(self):
        self.analyzer = BehavioralAnalyzer(settings=Settings())

    def test_short_body(self):
        result = self.analyzer.analyze(EmailData(body="Click the link."))

        assert result.score == 10
        assert result.flags == ("Suspiciously short email content",)

    def test_body_at_minimum_length_is_fine(self):
        result = self.analyzer.analyze(EmailData(body="a" * 30))

        assert result.score == 0

    def test_missing_body_is_not_short(self):
        result = self.analyzer.analyze(EmailData(subject="Hello"))

        assert result.score == 0
        assert result.flags == ()

    def test_capitalized_runs(self):
        result = self.analyzer.analyze(EmailData(subject="URGENT!!! VERIFY ACCOUNT NOW"))

        assert result.score == 15
        assert result.flags == ("Unusual capitalization detected",)

    def test_two_runs_are_tolerated(self):
        result = self.analyzer.analyze(EmailData(subject="URGENT VERIFY your account"))

        assert result.score == 0

    def test_capitalization_score_is_capped(self):
        result = self.analyzer.analyze(EmailData(subject="FINAL NOTICE URGENT ACTION REQUIRED"))

        assert result.score == 15

    def test_checks_are_additive(self):
        result = self.analyzer.analyze(
            EmailData(subject="URGENT!!! VERIFY ACCOUNT NOW", body="Click the link.")
        )

        assert result.score == 25
        assert result.flags == (
            "Suspiciously short email content",
            "Unusual capitalization detected",
        )
