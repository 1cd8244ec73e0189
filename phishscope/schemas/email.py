"""Email schemas for heuristic analysis requests and responses."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """Severity the mail client attached to a security banner."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ClientWarningType(str, Enum):
    """Strongest classification the mail client gave the message."""
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"
    OTHER = "other"


class RiskLevel(str, Enum):
    """Qualitative band for a numeric score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class LinkData(_FrozenModel):
    """Outbound anchor found in the message body."""
    href: str = ""
    text: str = ""

    @field_validator("href", "text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _text(v)


class SecurityWarning(_FrozenModel):
    """Security banner rendered by the mail client."""
    text: str = ""
    severity: Severity = Severity.LOW

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _text(v)

    @field_validator("severity", mode="before")
    @classmethod
    def coerce_severity(cls, v: Any) -> Severity:
        """Unknown severities count as the weakest one."""
        try:
            return Severity(_text(v).strip().lower())
        except ValueError:
            return Severity.LOW


class ClientWarning(_FrozenModel):
    """Single verdict the mail client placed on the message."""
    text: str = ""
    type: ClientWarningType = ClientWarningType.OTHER

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _text(v)

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v: Any) -> ClientWarningType:
        try:
            return ClientWarningType(_text(v).strip().lower())
        except ValueError:
            return ClientWarningType.OTHER


class EmailData(_FrozenModel):
    """
    Structured view of one email, as produced by the webmail extractor.

    Every field is optional: absent or ``null`` values fall back to empty
    defaults so a partially extracted message still validates.
    """
    sender: str = ""
    subject: str = ""
    body: str = ""
    links: List[LinkData] = Field(default_factory=list)
    security_warnings: List[SecurityWarning] = Field(
        default_factory=list, alias="securityWarnings"
    )
    client_warning: Optional[ClientWarning] = Field(default=None, alias="clientWarning")
    has_disabled_attachments: bool = Field(default=False, alias="hasDisabledAttachments")

    @field_validator("sender", "subject", "body", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _text(v)

    @field_validator("links", "security_warnings", mode="before")
    @classmethod
    def coerce_sequence(cls, v: Any) -> List[Any]:
        """Drop entries that are not objects instead of rejecting the email."""
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, BaseModel))]

    @field_validator("client_warning", mode="before")
    @classmethod
    def coerce_client_warning(cls, v: Any) -> Any:
        if isinstance(v, (dict, BaseModel)):
            return v
        return None

    @field_validator("has_disabled_attachments", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        return v is True or (isinstance(v, str) and v.strip().lower() == "true")


class AnalysisResult(_FrozenModel):
    """Final verdict returned to the caller."""
    score: int = Field(default=0, ge=0, le=100)
    flags: List[str] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
