"""URL analyzer scoring the structure of outbound links."""

from typing import Iterable, Optional
from urllib.parse import urlsplit

from phishscope.config.logging import get_logger
from phishscope.config.settings import Settings, get_settings
from phishscope.core.lookups import DEFAULT_TABLES, HeuristicTables
from phishscope.models.scoring import FlagSet, SubScore
from phishscope.schemas.email import EmailData, LinkData
from phishscope.utils.domain import (
    domains_match,
    embedded_domain,
    extract_domain,
    is_ipv4,
    top_level_label,
)

logger = get_logger(__name__)

LONG_URL_PENALTY = 5
IP_ADDRESS_PENALTY = 25
SHORTENER_PENALTY = 15
SUSPICIOUS_TLD_PENALTY = 15
HOMOGRAPH_PENALTY = 25
MISMATCHED_LINK_PENALTY = 20


class URLAnalyzer:
    """Scores each unique link independently and sums the per-link signals."""

    name = "url"

    def __init__(
        self,
        tables: Optional[HeuristicTables] = None,
        settings: Optional[Settings] = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.max_length = (settings or get_settings()).URL_MAX_LENGTH

    def analyze(self, email: EmailData) -> SubScore:
        return self.analyze_links(email.links)

    def analyze_links(self, links: Iterable[LinkData]) -> SubScore:
        score = 0
        flags = FlagSet()
        processed = set()
        long_url_count = 0
        mismatch_found = False

        for link in links or ():
            href = link.href
            if not href or href in processed:
                continue
            processed.add(href)

            if not mismatch_found and self._is_mismatched(link):
                score += MISMATCHED_LINK_PENALTY
                flags.add("Mismatched link text and destination")
                mismatch_found = True

            host = self._parse_host(href)
            if host is None:
                continue
            if host in self.tables.trusted_domains:
                continue

            if len(href) > self.max_length:
                score += LONG_URL_PENALTY
                long_url_count += 1
                continue

            if is_ipv4(host):
                score += IP_ADDRESS_PENALTY
                flags.add("IP address used instead of domain name")

            if host in self.tables.url_shorteners:
                score += SHORTENER_PENALTY
                flags.add("URL shortening service detected")

            tld = top_level_label(host)
            if tld in self.tables.suspicious_tlds:
                score += SUSPICIOUS_TLD_PENALTY
                flags.add(f"Suspicious TLD detected: {tld}")

            if self._is_homograph(host):
                score += HOMOGRAPH_PENALTY
                flags.add("Possible homograph attack detected")

        if long_url_count:
            plural = "s" if long_url_count > 1 else ""
            flags.add(f"Found {long_url_count} unusually long URL{plural}")

        result = SubScore.build(self.name, score, flags)
        logger.debug("URL analysis complete", links=len(processed), score=result.score)
        return result

    def _parse_host(self, href: str) -> Optional[str]:
        """Hostname of ``href``, or None when it is not a scoreable URL."""
        try:
            parsed = urlsplit(href.strip())
            host = parsed.hostname
        except ValueError as e:
            logger.debug("Skipping malformed URL", error=str(e))
            return None
        if not parsed.scheme or not host:
            return None
        return host.rstrip(".")

    def _is_homograph(self, host: str) -> bool:
        if not host.isascii():
            return True
        return any(label.startswith("xn--") for label in host.split("."))

    def _is_mismatched(self, link: LinkData) -> bool:
        """Anchor text names a domain the link does not actually point to."""
        shown = embedded_domain(link.text)
        if not shown:
            return False
        actual = extract_domain(link.href)
        return not domains_match(shown, actual)
