"""
PhishScope Configuration Validator

Checks that scoring thresholds are mutually consistent before the engine is
used, and reports errors, warnings and informational notes.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from phishscope.config.logging import get_logger
from phishscope.config.settings import Settings, get_settings
from phishscope.core.exceptions import ConfigurationError

logger = get_logger(__name__)


class ConfigValidator:
    """Configuration validator for scoring thresholds."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.info: List[str] = []

    def validate_all(self) -> Tuple[bool, Dict[str, Any]]:
        """Run all validation checks."""
        self.errors.clear()
        self.warnings.clear()
        self.info.clear()

        self._validate_application_config()
        self._validate_risk_bands()
        self._validate_dampening()
        self._validate_detector_thresholds()

        is_valid = len(self.errors) == 0
        report = {
            "valid": is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "info": list(self.info),
            "settings_summary": self._generate_summary(),
        }
        return is_valid, report

    def _validate_application_config(self):
        if not re.match(r"^\d+\.\d+\.\d+", self.settings.APP_VERSION):
            self.warnings.append(
                f"APP_VERSION '{self.settings.APP_VERSION}' should follow semantic versioning (x.y.z)"
            )
        if self.settings.LOG_LEVEL == "DEBUG":
            self.info.append("LOG_LEVEL is DEBUG - per-detector scores will be logged")

    def _validate_risk_bands(self):
        medium = self.settings.MEDIUM_RISK_THRESHOLD
        high = self.settings.HIGH_RISK_THRESHOLD
        if medium >= high:
            self.errors.append(
                f"MEDIUM_RISK_THRESHOLD ({medium}) must be below HIGH_RISK_THRESHOLD ({high})"
            )
        if medium == 0:
            self.warnings.append("MEDIUM_RISK_THRESHOLD is 0 - no email will be rated low risk")

    def _validate_dampening(self):
        for name in ("TRUSTED_SENDER_SCORE_CAP", "MARKETING_SCORE_CAP"):
            cap = getattr(self.settings, name)
            if cap >= self.settings.HIGH_RISK_THRESHOLD:
                self.warnings.append(
                    f"{name} ({cap}) does not keep dampened mail out of the high risk band"
                )
        if self.settings.TRUSTED_SEVERITY_MULTIPLIER == 1.0:
            self.info.append("TRUSTED_SEVERITY_MULTIPLIER is 1.0 - client warnings are not halved for trusted senders")

    def _validate_detector_thresholds(self):
        if self.settings.URL_MAX_LENGTH < 20:
            self.warnings.append("URL_MAX_LENGTH is very short (<20) - most links will be skipped as long URLs")
        if self.settings.MIN_BODY_LENGTH > 500:
            self.warnings.append("MIN_BODY_LENGTH is very long (>500) - most emails will be flagged as short")

    def _generate_summary(self) -> Dict[str, Any]:
        return {
            "app_name": self.settings.APP_NAME,
            "version": self.settings.APP_VERSION,
            "log_level": self.settings.LOG_LEVEL,
            "risk_bands": (self.settings.MEDIUM_RISK_THRESHOLD, self.settings.HIGH_RISK_THRESHOLD),
            "trusted_sender_cap": self.settings.TRUSTED_SENDER_SCORE_CAP,
            "marketing_cap": self.settings.MARKETING_SCORE_CAP,
        }

    def print_report(self, report: Dict[str, Any], show_summary: bool = True):
        """Print formatted validation report."""
        if report["valid"]:
            print("✅ Configuration validation passed!")
        else:
            print("❌ Configuration validation failed!")

        if report["errors"]:
            print(f"\n🔴 Errors ({len(report['errors'])}):")
            for error in report["errors"]:
                print(f"  • {error}")

        if report["warnings"]:
            print(f"\n🟡 Warnings ({len(report['warnings'])}):")
            for warning in report["warnings"]:
                print(f"  • {warning}")

        if report["info"]:
            print(f"\n🔵 Info ({len(report['info'])}):")
            for info in report["info"]:
                print(f"  • {info}")

        if show_summary and report["settings_summary"]:
            summary = report["settings_summary"]
            medium, high = summary["risk_bands"]
            print("\n📋 Configuration Summary:")
            print(f"  • App: {summary['app_name']} v{summary['version']}")
            print(f"  • Log level: {summary['log_level']}")
            print(f"  • Risk bands: medium >= {medium}, high >= {high}")
            print(f"  • Trusted sender cap: {summary['trusted_sender_cap']}")
            print(f"  • Marketing cap: {summary['marketing_cap']}")


def validate_configuration(settings: Optional[Settings] = None,
                           print_report: bool = True,
                           raise_on_error: bool = False) -> Tuple[bool, Dict[str, Any]]:
    """
    Validate PhishScope configuration.

    Args:
        settings: Settings instance to validate (default: get_settings())
        print_report: Whether to print validation report
        raise_on_error: Whether to raise exception on validation errors

    Returns:
        Tuple of (is_valid, report_dict)

    Raises:
        ConfigurationError: If validation fails and raise_on_error is True
    """
    if settings is None:
        settings = get_settings()

    validator = ConfigValidator(settings)
    is_valid, report = validator.validate_all()

    if print_report:
        validator.print_report(report)

    if not is_valid:
        logger.warning("Configuration validation failed", errors=len(report["errors"]))
        if raise_on_error:
            error_msg = "Configuration validation failed:\n" + "\n".join(report["errors"])
            raise ConfigurationError(error_msg)

    return is_valid, report
