"""Registration service for handling speaker submissions."""
import logging
from dataclasses import dataclass
from typing import Optional

from src.models.eligibility_rules import EligibilityRules
from src.models.speaker import Speaker
from src.services.speaker_repository import SpeakerRepository
from src.utils.exceptions import RegistrationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of one registration attempt: an id or the rule that rejected it."""

    speaker_id: Optional[int] = None
    error: Optional[RegistrationError] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.speaker_id is not None

    @property
    def message(self) -> str:
        if self.success:
            return "報名成功"
        return str(self.error)


def register_speaker(speaker: Speaker, repository: SpeakerRepository,
                     rules: Optional[EligibilityRules] = None) -> RegistrationResult:
    """
    Register a speaker and report the outcome as a value.

    Args:
        speaker: Speaker submission to evaluate
        repository: Storage collaborator
        rules: Denylists and thresholds (default: DEFAULT_RULES)

    Returns:
        RegistrationResult with ``speaker_id`` set on success, or ``error``
        holding the RegistrationError subclass for the first rule violated

    Behavior:
        - Rule violations are captured in the result, never raised
        - Repository failures propagate unchanged
    """
    try:
        speaker_id = speaker.register(repository, rules)
    except RegistrationError as e:
        logger.info(f"Rejected speaker {speaker.full_name!r} <{speaker.email}>: {type(e).__name__}: {e}")
        return RegistrationResult(error=e)

    logger.info(f"Registered speaker {speaker.full_name!r} <{speaker.email}> with id {speaker_id}")
    return RegistrationResult(speaker_id=speaker_id)
