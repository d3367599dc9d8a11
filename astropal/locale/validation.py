"""
Locale document validation.

Checks an authored locale document before it is uploaded to the store.
Errors block the upload; warnings point at untranslated copy.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from common.i18n import get_nested
from config.i18n_config import (
    ERROR_STATUS_CODES,
    REQUIRED_EMAIL_SUBJECTS,
    REQUIRED_SECTIONS,
)
from astropal.locale.perspectives import SUPPORTED_PERSPECTIVES


@dataclass
class ValidationReport:
    """Result of validating one locale document."""
    locale: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_locale_data(locale: str, data: Any) -> ValidationReport:
    """
    Validate the structure of a locale document.

    Args:
        locale: Locale code the document is meant for
        data: Parsed JSON document

    Returns:
        ValidationReport with errors and warnings
    """
    report = ValidationReport(locale=locale)

    if not isinstance(data, dict):
        report.errors.append(f"{locale}: document must be a JSON object")
        return report

    for section in REQUIRED_SECTIONS:
        if not isinstance(data.get(section), dict):
            report.errors.append(f"{locale}: missing section '{section}'")

    for perspective in SUPPORTED_PERSPECTIVES:
        if not isinstance(get_nested(data, f"perspectives.{perspective}"), dict):
            report.errors.append(f"{locale}: missing perspective '{perspective}'")
        if not isinstance(get_nested(data, f"prompts.system.{perspective}"), dict):
            report.warnings.append(f"{locale}: missing system prompt for '{perspective}'")

    for subject in REQUIRED_EMAIL_SUBJECTS:
        if not get_nested(data, f"email.subjects.{subject}"):
            report.warnings.append(f"{locale}: missing email subject '{subject}'")

    for code in ERROR_STATUS_CODES:
        if not get_nested(data, f"api.errors.{code}"):
            report.warnings.append(f"{locale}: missing API error message '{code}'")

    for path in _empty_leaves(data):
        report.warnings.append(f"{locale}: empty string at '{path}'")

    return report


def _empty_leaves(data: Dict[str, Any], prefix: str = "") -> List[str]:
    paths = []
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            paths.extend(_empty_leaves(value, path))
        elif value == "":
            paths.append(path)
    return paths
