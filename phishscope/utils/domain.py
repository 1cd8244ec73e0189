"""Domain normalization helpers shared by every detector."""

import re

_BRACKETED = re.compile(r"<([^<>]*)>")
_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*://")
_HOST = re.compile(r"^(?:[\w-]+\.)+[\w-]+$")
_IPV4 = re.compile(r"^(?:\d{1,3}\.){3}\d{1,3}$")
_TERMINATORS = re.compile(r"[/\s?#]")
_ALPHA_TLD = re.compile(r"\.[^\W\d_]{2,}$")

# File names in anchor text ("statement.pdf") are not hostnames
FILE_EXTENSIONS = frozenset({
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "rtf", "txt",
    "csv", "xml", "json", "htm", "html", "eml", "msg", "ics", "vcf",
    "zip", "rar", "gz", "tar", "iso", "img", "exe", "msi", "dmg", "apk",
    "jpg", "jpeg", "png", "gif", "bmp", "svg", "webp", "tif", "tiff",
    "mp3", "mp4", "wav", "avi", "mov",
})


def extract_domain(text) -> str:
    """
    Reduce a sender field or URL to a bare, lower-cased domain.

    ``"PayPal <service@paypal.com>"`` -> ``"paypal.com"``,
    ``"https://www.example.org/login"`` -> ``"example.org"``.
    Returns an empty string for anything that does not yield a hostname.
    """
    if not text or not isinstance(text, str):
        return ""

    value = text.strip().lower()
    bracketed = _BRACKETED.search(value)
    if bracketed:
        value = bracketed.group(1).strip()

    if _SCHEME.match(value):
        value = _SCHEME.sub("", value, count=1)
        value = _TERMINATORS.split(value, maxsplit=1)[0]
        # drop userinfo ("user:pass@host")
        value = value.rsplit("@", 1)[-1]
    elif "@" in value:
        value = value.rsplit("@", 1)[-1]
        value = _TERMINATORS.split(value, maxsplit=1)[0]
    else:
        value = _TERMINATORS.split(value, maxsplit=1)[0]

    if value.startswith("www."):
        value = value[4:]
    value = value.split(":", 1)[0].strip(".")

    if not value or not _HOST.match(value):
        return ""
    return value


def embedded_domain(text) -> str:
    """
    First hostname written out in free text such as a link's anchor text.

    ``"Log in at www.paypal.com"`` -> ``"paypal.com"``; ``"Click here"`` and
    ``"Download statement.pdf"`` -> ``""``.
    """
    if not text or not isinstance(text, str):
        return ""
    for token in text.split():
        token = token.strip("()[]<>{}\"',;:!.")
        if "." not in token or "@" in token:
            continue
        domain = extract_domain(token)
        if not domain or not _ALPHA_TLD.search(domain):
            continue
        if domain.rsplit(".", 1)[-1] in FILE_EXTENSIONS:
            continue
        return domain
    return ""


def domains_match(first: str, second: str) -> bool:
    """Equal domains, or one a subdomain of the other."""
    if not first or not second:
        return False
    return (
        first == second
        or first.endswith("." + second)
        or second.endswith("." + first)
    )


def is_ipv4(host: str) -> bool:
    return bool(host) and bool(_IPV4.match(host))


def top_level_label(host: str) -> str:
    """``"login.example.xyz"`` -> ``".xyz"``."""
    if not host:
        return ""
    return "." + host.rstrip(".").rsplit(".", 1)[-1]
