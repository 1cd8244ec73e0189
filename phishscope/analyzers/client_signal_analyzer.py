"""
Client-signal integrator.

Folds verdicts the mail client already computed (security banners, its own
suspicious/dangerous classification, blocked attachments) into the common
0-100 scoring space. The client may have run checks this engine cannot,
such as SPF/DKIM validation or attachment sandboxing.
"""

from typing import Dict, Optional

from phishscope.config.logging import get_logger
from phishscope.config.settings import Settings, get_settings
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import FlagSet, SubScore
from phishscope.schemas.email import ClientWarningType, EmailData, Severity
from phishscope.utils.domain import extract_domain

logger = get_logger(__name__)

SEVERITY_FLOORS: Dict[Severity, int] = {
    Severity.CRITICAL: 85,
    Severity.HIGH: 70,
    Severity.MEDIUM: 40,
    Severity.LOW: 20,
}

SEVERITY_PREFIXES: Dict[Severity, str] = {
    Severity.CRITICAL: "CRITICAL: ",
    Severity.HIGH: "HIGH RISK: ",
    Severity.MEDIUM: "",
    Severity.LOW: "",
}

CLIENT_WARNING_PENALTIES: Dict[ClientWarningType, int] = {
    ClientWarningType.DANGEROUS: 50,
    ClientWarningType.SUSPICIOUS: 30,
    ClientWarningType.OTHER: 15,
}

DISABLED_ATTACHMENTS_PENALTY = 15


class ClientSignalAnalyzer:
    """Raises the score to the floors implied by client warnings."""

    name = "client_signals"

    def __init__(
        self,
        tables: Optional[HeuristicTables] = None,
        settings: Optional[Settings] = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.trusted_multiplier = (settings or get_settings()).TRUSTED_SEVERITY_MULTIPLIER

    def analyze(self, email: EmailData) -> SubScore:
        trusted = self.tables.is_trusted_domain(extract_domain(email.sender))
        multiplier = self.trusted_multiplier if trusted else 1.0

        score = 0.0
        flags = FlagSet()

        for warning in email.security_warnings:
            score = max(score, SEVERITY_FLOORS[warning.severity] * multiplier)
            if warning.text:
                flags.add(f"{SEVERITY_PREFIXES[warning.severity]}{warning.text}")

        if email.client_warning is not None:
            warning = email.client_warning
            score += CLIENT_WARNING_PENALTIES[warning.type] * multiplier
            flags.add(f"Email client warning: {warning.text}" if warning.text else "Email client warning")

        if email.has_disabled_attachments:
            score += DISABLED_ATTACHMENTS_PENALTY * multiplier
            flags.add("Email client has disabled attachments due to security concerns")

        result = SubScore.build(self.name, score, flags)
        if result.score:
            logger.debug(
                "Client signals folded in",
                warnings=len(email.security_warnings),
                trusted_sender=trusted,
                score=result.score,
            )
        return result
