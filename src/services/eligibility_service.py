"""Predicates deciding whether a speaker and their sessions are eligible."""
from typing import List

from src.models.eligibility_rules import EligibilityRules
from src.models.session import Session


def email_domain(email: str) -> str:
    """Return the lowercased part of an email address after the last '@'."""
    return (email or "").rsplit("@", 1)[-1].strip().lower()


def works_for_prestige_employer(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """Check if the speaker's employer is on the prestige list."""
    return bool(speaker.employer) and speaker.employer.strip().casefold() in rules.prestige_employers


def uses_outdated_browser(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """Check if the speaker registered with a legacy browser below the minimum version."""
    browser = speaker.browser
    if browser is None:
        return False
    return (
        browser.normalized_name in rules.legacy_browsers
        and browser.major_version < rules.min_browser_version
    )


def uses_legacy_email(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """Check if the speaker's email belongs to a legacy provider."""
    return email_domain(speaker.email) in rules.legacy_email_domains


def has_red_flags(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """
    Check if the speaker profile looks digitally disengaged.

    Args:
        speaker: Speaker to evaluate
        rules: Denylists and thresholds

    Returns:
        True if the employer is not a prestige employer and the speaker
        either registered with an outdated browser or uses a legacy email
        domain
    """
    if works_for_prestige_employer(speaker, rules):
        return False
    return uses_outdated_browser(speaker, rules) or uses_legacy_email(speaker, rules)


def appears_exceptional(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """
    Check if the speaker stands out enough to override red flags.

    Returns:
        True if any of: prestige employer, maintains a blog, holds at least
        ``rules.min_certifications`` certifications, has at least
        ``rules.min_years_experience`` years of experience
    """
    return (
        works_for_prestige_employer(speaker, rules)
        or speaker.has_blog
        or len(speaker.certifications) >= rules.min_certifications
        or speaker.years_experience >= rules.min_years_experience
    )


def meets_requirements(speaker: 'Speaker', rules: EligibilityRules) -> bool:
    """Exceptional speakers qualify regardless of red flags."""
    return appears_exceptional(speaker, rules) or not has_red_flags(speaker, rules)


def approved_sessions(sessions: List[Session], rules: EligibilityRules) -> List[Session]:
    """Return the sessions whose topic is not on the outdated list, in submission order."""
    return [s for s in sessions if not s.is_old_tech(rules.outdated_topics)]
