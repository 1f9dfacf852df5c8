"""Session proposal data model."""
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Session:
    """A talk proposed by a speaker."""

    title: str
    description: str

    def is_old_tech(self, outdated_topics: Iterable[str]) -> bool:
        """
        Check if the session covers an outdated topic.

        Args:
            outdated_topics: Topic keywords considered outdated

        Returns:
            True if any keyword appears in the title or description
            (case-insensitive)
        """
        title = (self.title or "").lower()
        description = (self.description or "").lower()

        for topic in outdated_topics:
            keyword = topic.lower()
            if keyword in title or keyword in description:
                return True
        return False
