import re
import math
import logging
from typing import Optional
from booking_rules.core.config import settings
from booking_rules.domain.models.passport import (
    PassportValidation,
    DateOfBirthValidation,
    ValidityStatus,
)
from booking_rules.utils.clock import Clock, read_clock
from booking_rules.utils.dates import DateInput, MS_PER_DAY, is_blank, to_datetime, milliseconds_between

logger = logging.getLogger(__name__)

EXPIRY_REQUIRED = "Passport expiry date is required"
EXPIRY_NOT_A_DATE = "Passport expiry date is not a valid date"
ALREADY_EXPIRED = "Passport has already expired"
INSUFFICIENT_VALIDITY = "Passport must have at least 6 months validity from travel date"

DOB_REQUIRED = "Date of birth is required"
DOB_NOT_A_DATE = "Date of birth is not a valid date"
DOB_IN_FUTURE = "Date of birth cannot be in the future"
DOB_TOO_YOUNG = "Passenger must be at least 1 year old"
DOB_MISMATCH = "Date of birth does not match passport information"


def _months_between(start, end) -> int:
    """
    Whole months from `start` to `end`, rounded up, on a fixed 30-day month.
    Not calendar aware: the 6-month minimum is calibrated against this approximation.
    """
    ms_per_month = MS_PER_DAY * settings.passport_config['days_per_month']
    return math.ceil(milliseconds_between(start, end) / ms_per_month)


def validate_passport_expiry(
    expiry_date: Optional[DateInput],
    travel_date: Optional[DateInput] = None,
    *,
    clock: Optional[Clock] = None
) -> PassportValidation:
    """
    Check a passport's expiry against "now" and the planned travel date.

    Args:
        expiry_date: Passport expiry (ISO string, date or datetime)
        travel_date: Planned travel date; defaults to now when absent
        clock: Time source, defaults to the system clock

    Returns:
        PassportValidation with remaining months, renewal flag and error messages
    """
    if is_blank(expiry_date):
        return PassportValidation(
            is_valid=False,
            remaining_months=0,
            renewal_required=True,
            errors=[EXPIRY_REQUIRED]
        )

    now = read_clock(clock)
    try:
        expiry = to_datetime(expiry_date)
    except ValueError:
        logger.debug("Unparseable passport expiry date: %r", expiry_date)
        return PassportValidation(
            is_valid=False,
            remaining_months=0,
            renewal_required=True,
            errors=[EXPIRY_NOT_A_DATE]
        )

    if expiry <= now:
        return PassportValidation(
            is_valid=False,
            remaining_months=0,
            renewal_required=True,
            errors=[ALREADY_EXPIRED]
        )

    errors = []
    remaining_months = _months_between(now, expiry)

    months_until_travel = 0
    if not is_blank(travel_date):
        try:
            months_until_travel = _months_between(now, to_datetime(travel_date))
        except ValueError:
            # An unreadable travel date is checked like travelling today
            logger.debug("Unparseable travel date ignored: %r", travel_date)

    min_months = settings.passport_config['min_validity_months']
    validity_at_travel = remaining_months - months_until_travel
    if validity_at_travel < min_months:
        errors.append(INSUFFICIENT_VALIDITY)

    return PassportValidation(
        is_valid=not errors and remaining_months >= min_months,
        remaining_months=max(0, remaining_months),
        renewal_required=remaining_months < min_months,
        errors=errors
    )


def validate_passport_number(passport_number: Optional[str]) -> bool:
    """Alphanumeric, 6-9 characters, compared uppercase."""
    if not passport_number:
        return False
    return re.match(settings.passport_config['number_pattern'], passport_number.upper()) is not None


def validate_date_of_birth(
    date_of_birth: Optional[DateInput],
    reference_dob: Optional[str] = None,
    *,
    clock: Optional[Clock] = None
) -> DateOfBirthValidation:
    """
    Sanity-check a date of birth and compare it with the one printed in the passport.

    The comparison with `reference_dob` is on the raw strings: '1990-01-05' and
    '1990-1-5' do not match.
    """
    if is_blank(date_of_birth):
        return DateOfBirthValidation(is_valid=False, error=DOB_REQUIRED)

    try:
        dob = to_datetime(date_of_birth)
    except ValueError:
        return DateOfBirthValidation(is_valid=False, error=DOB_NOT_A_DATE)

    now = read_clock(clock)
    if dob > now:
        return DateOfBirthValidation(is_valid=False, error=DOB_IN_FUTURE)

    # Plain year difference here, unlike calculate_age
    if now.year - dob.year < settings.passport_config['min_passenger_age_years']:
        return DateOfBirthValidation(is_valid=False, error=DOB_TOO_YOUNG)

    if reference_dob and date_of_birth != reference_dob:
        return DateOfBirthValidation(is_valid=False, error=DOB_MISMATCH)

    return DateOfBirthValidation(is_valid=True)


def calculate_age(date_of_birth: Optional[DateInput], *, clock: Optional[Clock] = None) -> int:
    """Completed years of age; 0 for empty or unreadable input."""
    if is_blank(date_of_birth):
        return 0
    try:
        dob = to_datetime(date_of_birth)
    except ValueError:
        return 0

    now = read_clock(clock)
    age = now.year - dob.year
    if (now.month, now.day) < (dob.month, dob.day):
        return age - 1
    return age


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def format_remaining_validity(remaining_months: int) -> str:
    if remaining_months <= 0:
        return "Expired"
    if remaining_months < 12:
        return _plural(remaining_months, "month")

    years, months = divmod(remaining_months, 12)
    if months == 0:
        return _plural(years, "year")
    return f"{years}y {months}m"


def classify_validity(remaining_months: int) -> ValidityStatus:
    """Bucket remaining validity for display: comfortably valid, expiring soon, or renewal required."""
    cfg = settings.validity_status_config
    if remaining_months >= cfg['valid_months']:
        return ValidityStatus.VALID
    if remaining_months >= cfg['expiring_months']:
        return ValidityStatus.EXPIRING_SOON
    return ValidityStatus.RENEWAL_REQUIRED
