"""Sender analyzer: brand impersonation and generic salutations."""

from typing import Optional

from phishscope.config.logging import get_logger
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import SubScore
from phishscope.schemas.email import EmailData

logger = get_logger(__name__)

IMPERSONATION_PENALTY = 25
GENERIC_GREETING_PENALTY = 5


class SenderAnalyzer:
    """Flags brand names in the From field that the sending domain does not back up."""

    name = "sender"

    def __init__(self, tables: Optional[HeuristicTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def analyze(self, email: EmailData) -> SubScore:
        sender = self.analyze_sender(email.sender)
        greeting = self.analyze_greeting(email.body)
        return SubScore.build(
            self.name,
            sender.score + greeting.score,
            sender.flags + greeting.flags,
        )

    def analyze_sender(self, sender: str) -> SubScore:
        if not sender or not sender.strip():
            return SubScore.build(self.name, 0, ["Missing sender information"])

        sender_lower = sender.lower()
        for brand, domain in self.tables.brands:
            if brand in sender_lower and domain not in sender_lower:
                logger.debug("Brand mention without brand domain", brand=brand)
                return SubScore.build(
                    self.name, IMPERSONATION_PENALTY, [f"Potential {brand} impersonation"]
                )
        return SubScore.empty(self.name)

    def analyze_greeting(self, body: str) -> SubScore:
        """Generic salutation on the first line of the body."""
        if not body:
            return SubScore.empty(self.name)
        first_line = body.split("\n", 1)[0].strip()
        if self.tables.greeting_pattern.match(first_line):
            return SubScore.build(self.name, GENERIC_GREETING_PENALTY, ["Uses generic greeting"])
        return SubScore.empty(self.name)
