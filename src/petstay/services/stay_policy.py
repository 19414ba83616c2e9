"""Stay date policy shared by the submission handler and the booking form.

Implements the two rules a pair of stay dates must satisfy:
- Lead time: check-in is at least ``min_lead_days`` days after today
- Ordering: check-out falls on a later calendar day than check-in

All comparisons are by calendar day. "Today" is always passed in, so the
same inputs give the same answer wherever the policy is evaluated.
"""

import datetime as dt

from petstay.models.reservation import DateField, PolicyViolation

DEFAULT_MIN_LEAD_DAYS = 2
DATE_FORMAT = "%Y-%m-%d"


def parse_stay_date(value: str | None) -> dt.date | None:
    """Parse a YYYY-MM-DD string into a date.

    Args:
        value: Raw form value

    Returns:
        The date, or None if the value is blank, is not three numeric
        components, or names a day that does not exist (e.g. 2026-02-30).
    """
    if not value:
        return None

    parts = value.strip().split("-")
    if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
        return None

    year, month, day = (int(part) for part in parts)
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def format_stay_date(value: dt.date) -> str:
    """Format a date the way date inputs expect it (YYYY-MM-DD)."""
    return value.strftime(DATE_FORMAT)


def earliest_check_in(today: dt.date, min_lead_days: int = DEFAULT_MIN_LEAD_DAYS) -> dt.date:
    """First check-in day the lead-time rule accepts."""
    return today + dt.timedelta(days=min_lead_days)


def evaluate_stay_dates(
    check_in: str | None,
    check_out: str | None,
    *,
    today: dt.date,
    min_lead_days: int = DEFAULT_MIN_LEAD_DAYS,
) -> list[PolicyViolation]:
    """Apply the lead-time and ordering rules to a pair of raw dates.

    If either date does not parse, no violations are returned; reporting
    missing or malformed dates is up to the caller.

    Args:
        check_in: Raw check-in value (YYYY-MM-DD)
        check_out: Raw check-out value (YYYY-MM-DD)
        today: Calendar day to measure lead time from
        min_lead_days: Minimum days between today and check-in

    Returns:
        Violations in rule order (lead time, then ordering); empty if both
        rules pass.
    """
    check_in_date = parse_stay_date(check_in)
    check_out_date = parse_stay_date(check_out)
    if check_in_date is None or check_out_date is None:
        return []

    violations: list[PolicyViolation] = []

    lead_date = earliest_check_in(today, min_lead_days)
    if check_in_date < lead_date:
        violations.append(
            PolicyViolation(
                field=DateField.CHECK_IN,
                message=(
                    f"Check-in must be at least {min_lead_days} days from today "
                    f"({format_stay_date(lead_date)} or later)."
                ),
            )
        )

    if check_out_date <= check_in_date:
        violations.append(
            PolicyViolation(
                field=DateField.CHECK_OUT,
                message="Check-out must be after check-in.",
            )
        )

    return violations
