"""Content analyzer for urgency, data-request, spam and marketing phrasing."""

from dataclasses import dataclass
from typing import Optional, Pattern, Sequence

from phishscope.config.logging import get_logger
from phishscope.config.settings import Settings, get_settings
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import FlagSet, SubScore
from phishscope.schemas.email import EmailData

logger = get_logger(__name__)

SPAM_TRIGGER_SCORE = 15


@dataclass(frozen=True)
class PhraseCheck:
    """One phrase category and how its matches are scored."""
    patterns: Sequence[Pattern[str]]
    score_per_match: int
    max_score: int
    flag_template: str

    def count(self, content: str) -> int:
        return sum(1 for pattern in self.patterns if pattern.search(content))


class ContentAnalyzer:
    """Scans subject and body text for social-engineering phrasing."""

    name = "content"

    def __init__(
        self,
        tables: Optional[HeuristicTables] = None,
        settings: Optional[Settings] = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.marketing_threshold = (settings or get_settings()).MARKETING_PHRASE_THRESHOLD

    def analyze(self, email: EmailData) -> SubScore:
        content = self._normalize_text(email)

        if self.count_marketing_phrases(content) >= self.marketing_threshold:
            logger.debug("Skipping content checks for bulk marketing mail")
            return SubScore.empty(self.name)

        score = 0
        flags = FlagSet()
        for check in self._checks(content):
            matches = check.count(content)
            if matches:
                score += min(check.max_score, matches * check.score_per_match)
                flags.add(check.flag_template.format(count=matches))

        if any(trigger in content for trigger in self.tables.spam_triggers):
            score += SPAM_TRIGGER_SCORE
            flags.add("Contains common spam phrases")

        return SubScore.build(self.name, score, flags)

    def is_marketing(self, email: EmailData) -> bool:
        """Bulk/promotional mail, judged on phrase count or the broad pattern."""
        content = self._normalize_text(email)
        return (
            self.count_marketing_phrases(content) >= self.marketing_threshold
            or bool(self.tables.marketing_pattern.search(content))
        )

    def count_marketing_phrases(self, content: str) -> int:
        return sum(1 for phrase in self.tables.marketing_phrases if phrase in content)

    def _checks(self, content: str):
        promotional = bool(self.tables.marketing_pattern.search(content))
        return (
            PhraseCheck(
                patterns=self.tables.urgency_patterns,
                score_per_match=5 if promotional else 10,
                max_score=15 if promotional else 30,
                flag_template="Urgent language detected ({count} instances)",
            ),
            PhraseCheck(
                patterns=self.tables.sensitive_data_patterns,
                score_per_match=15,
                max_score=35,
                flag_template="Requests for sensitive information detected ({count} instances)",
            ),
        )

    @staticmethod
    def _normalize_text(email: EmailData) -> str:
        return f"{email.subject} {email.body}".lower()
