"""Data validation utilities."""
from typing import Any, Dict, Tuple

LIST_FIELDS = [
    "outdated_topics", "legacy_email_domains",
    "prestige_employers", "legacy_browsers"
]

THRESHOLD_FIELDS = [
    "min_certifications", "min_years_experience", "min_browser_version"
]


def validate_rules(rules_data: Dict[str, Any]) -> bool:
    """
    Validate an eligibility rules dictionary.

    Every key is optional; unknown keys are rejected so that typos don't
    silently fall back to defaults.

    Args:
        rules_data: Dictionary parsed from the rules file

    Returns:
        True if valid

    Raises:
        ValueError: If validation fails with detailed message
    """
    if not isinstance(rules_data, dict):
        raise ValueError("Rules data must be a dictionary")

    unknown = set(rules_data) - set(LIST_FIELDS) - set(THRESHOLD_FIELDS)
    if unknown:
        raise ValueError(f"Unknown rule fields: {', '.join(sorted(unknown))}")

    for field in LIST_FIELDS:
        if field not in rules_data:
            continue
        values = rules_data[field]
        if not isinstance(values, list):
            raise ValueError(f"{field} must be a list")
        for value in values:
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"All entries of {field} must be non-empty strings")

    for field in THRESHOLD_FIELDS:
        if field not in rules_data:
            continue
        value = rules_data[field]
        # bool is a subclass of int, reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"{field} must be a non-negative integer")

    return True


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate a speaker email address.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Email 不可為空") if empty
        - (False, "Email 格式錯誤") if it lacks a local part or domain
    """
    if not email or not email.strip():
        return False, "Email 不可為空"

    local, sep, domain = email.strip().rpartition("@")
    if not sep or not local or "." not in domain:
        return False, "Email 格式錯誤"
    return True, ""
