"""PhishScope: heuristic phishing risk scoring for structured email data."""

from phishscope.schemas.email import (
    AnalysisResult,
    ClientWarning,
    ClientWarningType,
    EmailData,
    LinkData,
    RiskLevel,
    SecurityWarning,
    Severity,
)
from phishscope.services.risk_scorer import HeuristicRiskScorer, analyze, get_risk_scorer

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "ClientWarning",
    "ClientWarningType",
    "EmailData",
    "HeuristicRiskScorer",
    "LinkData",
    "RiskLevel",
    "SecurityWarning",
    "Severity",
    "analyze",
    "get_risk_scorer",
]
