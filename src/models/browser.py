"""Browser data model."""
from dataclasses import dataclass

# Free-text names users type, mapped to one canonical key per browser
BROWSER_ALIASES = {
    "ie": "internet_explorer",
    "msie": "internet_explorer",
    "internet explorer": "internet_explorer",
    "internetexplorer": "internet_explorer",
    "firefox": "firefox",
    "mozilla firefox": "firefox",
    "chrome": "chrome",
    "google chrome": "chrome",
    "safari": "safari",
    "opera": "opera",
    "edge": "edge",
    "microsoft edge": "edge",
}


@dataclass(frozen=True)
class Browser:
    """Browser a speaker used to submit the registration."""

    name: str
    major_version: int

    def __post_init__(self):
        """Validate browser data after initialization."""
        if self.major_version < 0:
            raise ValueError("Browser major version cannot be negative")

    @property
    def normalized_name(self) -> str:
        """Canonical browser key, or 'unknown' for unrecognised names."""
        key = (self.name or "").strip().lower()
        return BROWSER_ALIASES.get(key, "unknown")
