"""Eligibility rules configuration model."""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet


@dataclass(frozen=True)
class EligibilityRules:
    """Denylists and thresholds applied when evaluating a speaker."""

    outdated_topics: FrozenSet[str] = field(default_factory=lambda: frozenset({"Cobol"}))
    legacy_email_domains: FrozenSet[str] = field(default_factory=lambda: frozenset({"aol.com"}))
    prestige_employers: FrozenSet[str] = field(default_factory=lambda: frozenset({"Microsoft"}))
    legacy_browsers: FrozenSet[str] = field(default_factory=lambda: frozenset({"internet_explorer"}))
    min_certifications: int = 3
    min_years_experience: int = 10
    min_browser_version: int = 9

    def __post_init__(self):
        """Validate thresholds and normalise denylists after initialization."""
        # Domains, employers and browser keys compare case-insensitively
        object.__setattr__(self, "legacy_email_domains",
                           frozenset(d.strip().lower() for d in self.legacy_email_domains))
        object.__setattr__(self, "prestige_employers",
                           frozenset(e.strip().casefold() for e in self.prestige_employers))
        object.__setattr__(self, "legacy_browsers",
                           frozenset(b.strip().lower() for b in self.legacy_browsers))
        object.__setattr__(self, "outdated_topics", frozenset(self.outdated_topics))

        if self.min_certifications < 0:
            raise ValueError("min_certifications cannot be negative")

        if self.min_years_experience < 0:
            raise ValueError("min_years_experience cannot be negative")

        if self.min_browser_version < 0:
            raise ValueError("min_browser_version cannot be negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EligibilityRules":
        """
        Build rules from a parsed JSON document.

        Keys missing from ``data`` keep their default values.
        """
        defaults = cls()
        return cls(
            outdated_topics=frozenset(data.get("outdated_topics", defaults.outdated_topics)),
            legacy_email_domains=frozenset(data.get("legacy_email_domains", defaults.legacy_email_domains)),
            prestige_employers=frozenset(data.get("prestige_employers", defaults.prestige_employers)),
            legacy_browsers=frozenset(data.get("legacy_browsers", defaults.legacy_browsers)),
            min_certifications=data.get("min_certifications", defaults.min_certifications),
            min_years_experience=data.get("min_years_experience", defaults.min_years_experience),
            min_browser_version=data.get("min_browser_version", defaults.min_browser_version),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rules to a JSON-compatible dictionary."""
        return {
            "outdated_topics": sorted(self.outdated_topics),
            "legacy_email_domains": sorted(self.legacy_email_domains),
            "prestige_employers": sorted(self.prestige_employers),
            "legacy_browsers": sorted(self.legacy_browsers),
            "min_certifications": self.min_certifications,
            "min_years_experience": self.min_years_experience,
            "min_browser_version": self.min_browser_version,
        }


DEFAULT_RULES = EligibilityRules()
