"""Structural anomalies in the message shape."""

from typing import Optional

from phishscope.config.settings import Settings, get_settings
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import FlagSet, SubScore
from phishscope.schemas.email import EmailData

SHORT_BODY_PENALTY = 10
CAPS_RUN_SCORE = 5
CAPS_SCORE_CAP = 15
CAPS_RUN_LIMIT = 2


class BehavioralAnalyzer:
    name = "behavioral"

    def __init__(
        self,
        tables: Optional[HeuristicTables] = None,
        settings: Optional[Settings] = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.min_body_length = (settings or get_settings()).MIN_BODY_LENGTH

    def analyze(self, email: EmailData) -> SubScore:
        score = 0
        flags = FlagSet()

        if email.body and len(email.body) < self.min_body_length:
            score += SHORT_BODY_PENALTY
            flags.add("Suspiciously short email content")

        if email.subject:
            runs = len(self.tables.caps_run_pattern.findall(email.subject))
            if runs > CAPS_RUN_LIMIT:
                score += min(CAPS_SCORE_CAP, runs * CAPS_RUN_SCORE)
                flags.add("Unusual capitalization detected")

        return SubScore.build(self.name, score, flags)
