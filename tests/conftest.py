"""
Shared test configuration for the PhishScope test suite.
"""

import os

import pytest

# Keep test runs independent of the developer's environment
for key in list(os.environ):
    if key.startswith("PHISHSCOPE_"):
        del os.environ[key]

from phishscope.config.settings import Settings
from phishscope.schemas.email import EmailData
from phishscope.services.risk_scorer import HeuristicRiskScorer


@pytest.fixture
def settings() -> Settings:
    """Default settings, built fresh for each test."""
    return Settings()


@pytest.fixture
def scorer(settings) -> HeuristicRiskScorer:
    return HeuristicRiskScorer(settings=settings)


@pytest.fixture
def make_email():
    """Build an ``EmailData`` from keyword overrides using the extractor's field names."""
    def _make(**overrides) -> EmailData:
        payload = {
            "sender": "Jordan Lee <jordan@northwind-traders.example>",
            "subject": "Quarterly planning notes",
            "body": "Hi team, the notes from this morning's planning meeting are attached below.",
        }
        payload.update(overrides)
        return EmailData.model_validate(payload)
    return _make
