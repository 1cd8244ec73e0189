"""Unit tests for the URL analyzer."""

import pytest

from phishscope.analyzers.url_analyzer import URLAnalyzer
from phishscope.config.settings import Settings
from phishscope.schemas.email import LinkData


def links(*hrefs, text="Open"):
    return [LinkData(href=href, text=text) for href in hrefs]


class TestURLAnalyzer:
    """Test per-link scoring and aggregation."""

    def setup_method(self):
        self.analyzer = URLAnalyzer(settings=Settings())

    def test_ip_address_host(self):
        result = self.analyzer.analyze_links(links("http://192.168.1.1/login"))

        assert result.score == 25
        assert result.flags == ("IP address used instead of domain name",)

    def test_trusted_host_is_not_scored(self):
        result = self.analyzer.analyze_links(links("https://github.com/org/repo"))

        assert result.score == 0
        assert result.flags == ()

    def test_url_shortener(self):
        result = self.analyzer.analyze_links(links("https://bit.ly/3xYz"))

        assert result.score == 15
        assert "URL shortening service detected" in result.flags

    def test_suspicious_tld_is_named(self):
        result = self.analyzer.analyze_links(links("http://secure-login.xyz/verify"))

        assert result.score == 15
        assert "Suspicious TLD detected: .xyz" in result.flags

    def test_unicode_host_is_homograph(self):
        result = self.analyzer.analyze_links(links("http://pаypal.com/signin"))

        assert result.score == 25
        assert "Possible homograph attack detected" in result.flags

    def test_punycode_host_is_homograph(self):
        result = self.analyzer.analyze_links(links("http://xn--pypal-4ve.com/signin"))

        assert "Possible homograph attack detected" in result.flags

    def test_signals_on_one_link_are_cumulative(self):
        result = self.analyzer.analyze_links(links("http://pаypal.xyz/signin"))

        assert result.score == 40
        assert result.flags == (
            "Suspicious TLD detected: .xyz",
            "Possible homograph attack detected",
        )

    def test_repeated_links_are_scored_once(self):
        result = self.analyzer.analyze_links(
            links("http://192.168.1.1/login", "http://192.168.1.1/login")
        )

        assert result.score == 25

    def test_long_url_short_circuits_other_checks(self):
        long_ip_url = "http://192.168.1.1/" + "a" * 100
        result = self.analyzer.analyze_links(links(long_ip_url))

        assert result.score == 5
        assert result.flags == ("Found 1 unusually long URL",)

    def test_long_url_flag_uses_plural(self):
        result = self.analyzer.analyze_links(links(
            "http://example.com/" + "a" * 100,
            "http://example.com/" + "b" * 100,
        ))

        assert result.score == 10
        assert result.flags == ("Found 2 unusually long URLs",)

    def test_length_threshold_comes_from_settings(self):
        analyzer = URLAnalyzer(settings=Settings(URL_MAX_LENGTH=20))
        result = analyzer.analyze_links(links("http://example.com/abcdefghij"))

        assert result.flags == ("Found 1 unusually long URL",)

    @pytest.mark.parametrize("href", ["not a url", "http://[invalid", "", "mailto:someone"])
    def test_malformed_urls_are_unscoreable(self, href):
        result = self.analyzer.analyze_links(links(href))

        assert result.score == 0
        assert result.flags == ()

    def test_total_is_clamped(self):
        result = self.analyzer.analyze_links(links(*(f"http://10.0.0.{i}/" for i in range(6))))

        assert result.score == 100
        assert result.flags == ("IP address used instead of domain name",)


class TestLinkTextMismatch:
    """Test anchor-text versus destination checks."""

    def setup_method(self):
        self.analyzer = URLAnalyzer(settings=Settings())

    def test_anchor_names_other_domain(self):
        result = self.analyzer.analyze_links([
            LinkData(href="http://evil.example.net/login", text="www.paypal.com"),
        ])

        assert result.score == 20
        assert result.flags == ("Mismatched link text and destination",)

    def test_only_first_mismatch_counts(self):
        result = self.analyzer.analyze_links([
            LinkData(href="http://evil.example.net/login", text="www.paypal.com"),
            LinkData(href="http://other.example.org/", text="paypal.com"),
        ])

        assert result.score == 20

    def test_subdomain_anchor_is_consistent(self):
        result = self.analyzer.analyze_links([
            LinkData(href="https://google.com/settings", text="accounts.google.com"),
        ])

        assert result.score == 0

    def test_mismatch_fires_for_trusted_destination(self):
        result = self.analyzer.analyze_links([
            LinkData(href="https://google.com/", text="paypal.com"),
        ])

        assert result.score == 20

    def test_file_name_anchor_is_not_a_mismatch(self):
        result = self.analyzer.analyze_links([
            LinkData(href="https://files.example.net/s/8841", text="Download statement.pdf"),
        ])

        assert result.score == 0
        assert result.flags == ()

    def test_plain_anchor_text_is_ignored(self):
        result = self.analyzer.analyze_links([
            LinkData(href="https://example.org/account", text="Click here"),
        ])

        assert result.score == 0
        assert result.flags == ()
