"""Eligibility rules loading from JSON with environment override."""
import json
import logging
import os
from pathlib import Path
from typing import Optional

from src.models.eligibility_rules import DEFAULT_RULES, EligibilityRules
from src.services.storage_service import load_json
from src.utils.exceptions import ValidationError
from src.utils.validation import validate_rules

logger = logging.getLogger(__name__)

RULES_FILE = "data/eligibility_rules.json"
RULES_FILE_ENV = "ELIGIBILITY_RULES_FILE"


def _read_dotenv(key: str, env_path: str = ".env") -> Optional[str]:
    """Return the value of ``key`` in a .env file, or None if absent."""
    path = Path(env_path)
    if not path.exists():
        return None

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        name, sep, value = raw_line.strip().partition("=")
        if sep and name.strip() == key:
            return value.strip().strip('"\'')
    return None


def resolve_rules_path(file_path: Optional[str] = None) -> str:
    """Explicit path first, then the environment, then .env, then RULES_FILE."""
    if file_path:
        return file_path

    return os.getenv(RULES_FILE_ENV) or _read_dotenv(RULES_FILE_ENV) or RULES_FILE


def load_rules(file_path: Optional[str] = None) -> EligibilityRules:
    """
    Load eligibility rules.

    Args:
        file_path: Rules file to read (default: resolved by resolve_rules_path)

    Returns:
        EligibilityRules: Parsed rules, or DEFAULT_RULES if the file is missing

    Raises:
        ValidationError: If the file is malformed or holds invalid values
    """
    path = resolve_rules_path(file_path)

    try:
        data = load_json(path)
    except FileNotFoundError:
        logger.info(f"Rules file {path} not found, using default rules")
        return DEFAULT_RULES
    except json.JSONDecodeError as e:
        raise ValidationError(f"Rules file {path} is not valid JSON: {e.msg}") from e

    try:
        validate_rules(data)
        rules = EligibilityRules.from_dict(data)
    except ValueError as e:
        raise ValidationError(f"Invalid rules in {path}: {e}") from e

    logger.info(f"Loaded eligibility rules from {path}: {rules.to_dict()}")
    return rules
