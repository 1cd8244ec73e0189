"""
Curated lookup tables shared by the heuristic detectors.

Everything here is immutable: tables are built once, wrapped in a
``HeuristicTables`` instance and handed to each detector at construction.
"""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Pattern, Tuple


# Hosts whose links are never scored, and senders that get trust dampening.
TRUSTED_DOMAINS: FrozenSet[str] = frozenset({
    "linkedin.com",
    "linkedin-ei.com",
    "linkedin-msgs.com",
    "outlook.com",
    "google.com",
    "facebook.com",
    "twitter.com",
    "instagram.com",
    "amazon.com",
    "microsoft.com",
    "apple.com",
    "github.com",
})

URL_SHORTENERS: FrozenSet[str] = frozenset({
    "bit.ly", "goo.gl", "tinyurl.com", "t.co", "tiny.cc",
    "is.gd", "cli.gs", "pic.gd", "dwarfurl.com", "ow.ly",
    "yfrog.com", "migre.me", "ff.im", "tiny.pl", "url4.eu",
    "tr.im", "twit.ac", "su.pr", "twurl.nl", "snipurl.com",
    "short.to", "budurl.com", "ping.fm", "post.ly", "just.as",
    "bkite.com", "snipr.com", "fic.kr", "loopt.us", "doiop.com",
    "rubyurl.com",
})

SUSPICIOUS_TLDS: FrozenSet[str] = frozenset({
    ".xyz", ".top", ".club", ".online", ".site", ".work", ".info",
})

URGENCY_PHRASES: Tuple[str, ...] = (
    "urgent", "immediate", "action required", "account suspended",
    "verify your account", "security alert", "unauthorized access",
    "limited time", "expires soon", "act now", "immediate attention",
    "account closed", "suspicious activity", "unusual sign-in",
    "password expired", "security breach", "unusual activity",
)

SENSITIVE_DATA_PHRASES: Tuple[str, ...] = (
    "social security", "password", "credit card", "bank account",
    "login credentials", "verify identity", "confirm identity",
    "personal details", "billing information", "payment info",
)

SPAM_TRIGGERS: Tuple[str, ...] = (
    "million dollars", "nigerian prince", "lottery winner",
    "claim your prize", "wire transfer", "western union",
    "money transfer", "inheritance claim", "unclaimed funds",
    "winning notification", "congratulations you won", "next of kin",
)

MARKETING_PHRASES: Tuple[str, ...] = (
    "unsubscribe",
    "view in browser",
    "privacy policy",
    "terms of service",
    "email preferences",
    "update profile",
    "marketing preferences",
    "subscription preferences",
)

# (brand name as it appears in a From line, the brand's real domain)
COMMON_BRANDS: Tuple[Tuple[str, str], ...] = (
    ("paypal", "paypal.com"),
    ("apple", "apple.com"),
    ("microsoft", "microsoft.com"),
    ("google", "google.com"),
    ("amazon", "amazon.com"),
    ("facebook", "facebook.com"),
    ("netflix", "netflix.com"),
)

GENERIC_GREETINGS: Tuple[str, ...] = (
    "dear customer",
    "dear valued customer",
    "dear sir",
    "dear madam",
    "dear user",
    "dear email user",
    "dear account holder",
    "to whom it may concern",
)

# Substring match: "updated" and "offers" count too
MARKETING_PATTERN = re.compile(
    r"newsletter|subscription|update|announcement|invitation|"
    r"offer|discount|sale|promotion",
    re.IGNORECASE,
)

CAPS_RUN_PATTERN = re.compile(r"[A-Z]{5,}")


def phrase_pattern(phrase: str) -> Pattern[str]:
    """Compile a case-insensitive whole-phrase matcher."""
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE)


def _compile_all(phrases: Tuple[str, ...]) -> Tuple[Pattern[str], ...]:
    return tuple(phrase_pattern(p) for p in phrases)


@dataclass(frozen=True)
class HeuristicTables:
    """Read-only bundle of every curated table the detectors consult."""
    trusted_domains: FrozenSet[str] = TRUSTED_DOMAINS
    url_shorteners: FrozenSet[str] = URL_SHORTENERS
    suspicious_tlds: FrozenSet[str] = SUSPICIOUS_TLDS
    urgency_phrases: Tuple[str, ...] = URGENCY_PHRASES
    sensitive_data_phrases: Tuple[str, ...] = SENSITIVE_DATA_PHRASES
    spam_triggers: Tuple[str, ...] = SPAM_TRIGGERS
    marketing_phrases: Tuple[str, ...] = MARKETING_PHRASES
    brands: Tuple[Tuple[str, str], ...] = COMMON_BRANDS
    generic_greetings: Tuple[str, ...] = GENERIC_GREETINGS
    marketing_pattern: Pattern[str] = MARKETING_PATTERN
    caps_run_pattern: Pattern[str] = CAPS_RUN_PATTERN

    urgency_patterns: Tuple[Pattern[str], ...] = field(init=False)
    sensitive_data_patterns: Tuple[Pattern[str], ...] = field(init=False)
    greeting_pattern: Pattern[str] = field(init=False)

    def __post_init__(self):
        # frozen dataclass: derived patterns are set through object.__setattr__
        object.__setattr__(self, "urgency_patterns", _compile_all(self.urgency_phrases))
        object.__setattr__(
            self, "sensitive_data_patterns", _compile_all(self.sensitive_data_phrases)
        )
        greetings = "|".join(re.escape(g) for g in self.generic_greetings)
        object.__setattr__(
            self, "greeting_pattern", re.compile(rf"^\s*(?:{greetings})\b", re.IGNORECASE)
        )

    def is_trusted_domain(self, domain: str) -> bool:
        """True for a trusted domain or any subdomain of one."""
        if not domain:
            return False
        return any(
            domain == trusted or domain.endswith("." + trusted)
            for trusted in self.trusted_domains
        )


DEFAULT_TABLES = HeuristicTables()
