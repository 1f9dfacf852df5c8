"""Speaker data model."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.models.browser import Browser
from src.models.eligibility_rules import DEFAULT_RULES, EligibilityRules
from src.models.session import Session
from src.utils.exceptions import (
    InvalidArgumentError,
    MissingRequiredFieldError,
    NoSessionsApprovedError,
    SpeakerDoesNotMeetRequirementsError,
)


@dataclass
class Speaker:
    """Speaker submitting one or more sessions to the conference."""

    first_name: str
    last_name: str
    email: str
    employer: Optional[str] = None
    years_experience: int = 0
    has_blog: bool = False
    blog_url: str = ""
    certifications: List[str] = field(default_factory=list)
    browser: Optional[Browser] = None
    sessions: List[Session] = field(default_factory=list)

    def __post_init__(self):
        """Validate speaker data after initialization."""
        if self.years_experience < 0:
            raise ValueError("Years of experience cannot be negative")

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def register(self, repository: 'SpeakerRepository',
                 rules: Optional[EligibilityRules] = None) -> int:
        """
        Evaluate the submission and persist the speaker if it qualifies.

        Args:
            repository: Storage exposing ``add_speaker(speaker) -> int``
            rules: Denylists and thresholds (default: DEFAULT_RULES)

        Returns:
            int: Identifier generated by the repository

        Raises:
            MissingRequiredFieldError: first name, last name or email empty,
                checked in that order
            InvalidArgumentError: no sessions submitted
            NoSessionsApprovedError: every session covers an outdated topic
            SpeakerDoesNotMeetRequirementsError: not exceptional and has red flags
        """
        from src.services.eligibility_service import approved_sessions, meets_requirements

        rules = rules or DEFAULT_RULES

        for field_name in ("first_name", "last_name", "email"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise MissingRequiredFieldError(field_name)

        if not self.sessions:
            raise InvalidArgumentError("Can't register speaker with no sessions to present")

        if not approved_sessions(self.sessions, rules):
            raise NoSessionsApprovedError("No sessions approved")

        if not meets_requirements(self, rules):
            raise SpeakerDoesNotMeetRequirementsError(
                "Speaker doesn't meet our arbitrary and capricious standards"
            )

        return repository.add_speaker(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize speaker to a JSON-compatible dictionary."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "employer": self.employer,
            "years_experience": self.years_experience,
            "has_blog": self.has_blog,
            "blog_url": self.blog_url,
            "certifications": list(self.certifications),
            "browser": (
                {"name": self.browser.name, "major_version": self.browser.major_version}
                if self.browser is not None else None
            ),
            "sessions": [
                {"title": s.title, "description": s.description}
                for s in self.sessions
            ],
        }
