"""
HeuristicRiskScorer: composite phishing risk score for a single email.

Runs every detector independently and keeps the single most alarming
sub-score (max, not sum), so unrelated weak signals never compound into a
high score. Two dampening rules follow:

- senders on the highly trusted list are capped at TRUSTED_SENDER_SCORE_CAP
- marketing mail is capped at MARKETING_SCORE_CAP
"""

from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from phishscope.analyzers.behavioral_analyzer import BehavioralAnalyzer
from phishscope.analyzers.client_signal_analyzer import ClientSignalAnalyzer
from phishscope.analyzers.content_analyzer import ContentAnalyzer
from phishscope.analyzers.interfaces import BaseDetector
from phishscope.analyzers.sender_analyzer import SenderAnalyzer
from phishscope.analyzers.url_analyzer import URLAnalyzer
from phishscope.config.logging import get_logger
from phishscope.config.settings import Settings, get_settings
from phishscope.core.exceptions import InvalidPayloadError
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import FlagSet, SubScore, clamp_score
from phishscope.schemas.email import AnalysisResult, EmailData, RiskLevel
from phishscope.utils.domain import extract_domain

logger = get_logger(__name__)

NO_DATA_FLAG = "Unable to analyze email: No email data found"
MARKETING_FLAG = "This appears to be a marketing email"


class HeuristicRiskScorer:
    """
    Policy layer combining detector sub-scores into one ``AnalysisResult``.

    Detectors run in a fixed order (URL, content, sender, behavioral,
    client signals); flags are reported in that order.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tables: Optional[HeuristicTables] = None,
    ):
        self.settings = settings or get_settings()
        self.tables = tables or DEFAULT_TABLES

        self.content_analyzer = ContentAnalyzer(self.tables, self.settings)
        self.detectors: Sequence[BaseDetector] = (
            URLAnalyzer(self.tables, self.settings),
            self.content_analyzer,
            SenderAnalyzer(self.tables),
            BehavioralAnalyzer(self.tables, self.settings),
            ClientSignalAnalyzer(self.tables, self.settings),
        )

    def analyze(self, email: Optional[EmailData]) -> AnalysisResult:
        """Score one email. Never raises for missing or malformed fields."""
        if email is None:
            return AnalysisResult(score=0, flags=[NO_DATA_FLAG], risk_level=RiskLevel.LOW)

        sub_scores = self.run_detectors(email)

        score = max((sub.score for sub in sub_scores), default=0)
        flags = FlagSet()
        for sub in sub_scores:
            flags.extend(sub.flags)

        if self.tables.is_trusted_domain(extract_domain(email.sender)):
            score = min(score, self.settings.TRUSTED_SENDER_SCORE_CAP)

        if self.content_analyzer.is_marketing(email):
            score = min(score, self.settings.MARKETING_SCORE_CAP)
            if score > 0:
                flags.add(MARKETING_FLAG)

        score = clamp_score(score)
        result = AnalysisResult(
            score=score,
            flags=flags.to_list(),
            risk_level=self.risk_level(score),
        )

        logger.info(
            "Email risk scored",
            score=result.score,
            risk_level=result.risk_level.value,
            flags=len(result.flags),
        )
        return result

    def analyze_payload(self, payload: Optional[Mapping[str, Any]]) -> AnalysisResult:
        """Validate a JSON-like mapping into ``EmailData`` and score it."""
        if payload is None:
            return self.analyze(None)
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError(
                f"Email payload must be an object, got {type(payload).__name__}"
            )
        try:
            email = EmailData.model_validate(dict(payload))
        except ValidationError as e:
            raise InvalidPayloadError(f"Invalid email payload: {e}") from e
        return self.analyze(email)

    def run_detectors(self, email: EmailData) -> List[SubScore]:
        sub_scores = []
        for detector in self.detectors:
            sub = detector.analyze(email)
            logger.debug("Detector finished", detector=sub.detector, score=sub.score)
            sub_scores.append(sub)
        return sub_scores

    def risk_level(self, score: int) -> RiskLevel:
        if score >= self.settings.HIGH_RISK_THRESHOLD:
            return RiskLevel.HIGH
        if score >= self.settings.MEDIUM_RISK_THRESHOLD:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


_default_scorer: Optional[HeuristicRiskScorer] = None


def get_risk_scorer() -> HeuristicRiskScorer:
    """Shared scorer built from the global settings on first use."""
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = HeuristicRiskScorer()
    return _default_scorer


def analyze(email: Optional[EmailData]) -> AnalysisResult:
    """Score ``email`` with the default scorer."""
    return get_risk_scorer().analyze(email)
