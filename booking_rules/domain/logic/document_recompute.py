import logging
from typing import Any, List, Optional
from booking_rules.core.config import settings
from booking_rules.domain.logic.passport_validator import (
    validate_passport_expiry,
    validate_passport_number,
    validate_date_of_birth,
    EXPIRY_NOT_A_DATE,
)
from booking_rules.domain.models.passport import (
    PassengerDocument,
    DocumentStatus,
    EDITABLE_FIELDS,
    REQUIRED_FIELDS,
)
from booking_rules.utils.clock import Clock, read_clock
from booking_rules.utils.dates import DateInput, is_blank, to_datetime

logger = logging.getLogger(__name__)

INVALID_NUMBER = "Invalid passport number format"
ISSUE_AFTER_EXPIRY = "Issue date must be before expiry date"
ISSUE_IN_FUTURE = "Issue date cannot be in the future"
ISSUE_NOT_A_DATE = "Issue date is not a valid date"


def _issue_date_errors(document: PassengerDocument, now) -> List[str]:
    if is_blank(document.issue_date):
        return []
    try:
        issued = to_datetime(document.issue_date)
    except ValueError:
        return [ISSUE_NOT_A_DATE]

    errors = []
    if issued > now:
        errors.append(ISSUE_IN_FUTURE)
    if not is_blank(document.expiry_date):
        try:
            if issued >= to_datetime(document.expiry_date):
                errors.append(ISSUE_AFTER_EXPIRY)
        except ValueError:
            pass  # already reported by the expiry check
    return errors


def _status(
    document: PassengerDocument,
    field_errors: List[str],
    is_eligible: bool,
    renewal_required: bool
) -> DocumentStatus:
    """
    INVALID is reserved for wrong or unreadable entries. A passport with enough
    validity today but under six months left at the travel date is
    INSUFFICIENT_VALIDITY, so it is not shown as bad data.
    """
    filled = [not is_blank(getattr(document, name)) for name in REQUIRED_FIELDS]
    if not any(filled):
        return DocumentStatus.EMPTY
    if not all(filled):
        return DocumentStatus.PARTIALLY_ENTERED
    if field_errors:
        return DocumentStatus.INVALID
    if renewal_required:
        return DocumentStatus.RENEWAL_REQUIRED
    if is_eligible:
        return DocumentStatus.ELIGIBLE
    return DocumentStatus.INSUFFICIENT_VALIDITY


def recompute_document(
    document: PassengerDocument,
    travel_date: Optional[DateInput] = None,
    *,
    clock: Optional[Clock] = None
) -> PassengerDocument:
    """
    Re-derive eligibility, remaining validity, renewal flag, errors and status.

    Returns a new document; the input is left untouched. The clock is read once
    so every derived field agrees on the same "now".
    """
    now = read_clock(clock)

    def fixed_clock():
        return now

    expiry = validate_passport_expiry(document.expiry_date, travel_date, clock=fixed_clock)
    # Problems with the entered data itself, as opposed to too little validity left
    field_errors = [e for e in expiry.errors if e == EXPIRY_NOT_A_DATE]

    if document.passport_number and not validate_passport_number(document.passport_number):
        field_errors.append(INVALID_NUMBER)

    if not is_blank(document.date_of_birth):
        dob = validate_date_of_birth(document.date_of_birth, clock=fixed_clock)
        if not dob.is_valid:
            field_errors.append(dob.error)

    field_errors.extend(_issue_date_errors(document, now))
    errors = [e for e in expiry.errors if e != EXPIRY_NOT_A_DATE] + field_errors

    min_months = settings.passport_config['min_validity_months']
    remaining = expiry.remaining_months
    renewal_required = remaining < min_months
    is_eligible = remaining >= min_months and not errors

    return document.model_copy(update={
        'remaining_validity_months': remaining,
        'renewal_required': renewal_required,
        'is_eligible': is_eligible,
        'errors': errors,
        'status': _status(document, field_errors, is_eligible, renewal_required),
    })


def update_document_field(
    document: PassengerDocument,
    field: str,
    value: Any,
    travel_date: Optional[DateInput] = None,
    *,
    clock: Optional[Clock] = None
) -> PassengerDocument:
    """
    Write one form field and recompute the derived fields in the same step.

    Raises:
        ValueError: if `field` is not a form-editable field
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"'{field}' is not an editable document field")

    data = document.model_dump(include=set(EDITABLE_FIELDS))
    data[field] = value
    updated = PassengerDocument(**data)
    logger.debug("Document field %s updated", field)
    return recompute_document(updated, travel_date, clock=clock)


def new_document(date_of_birth: str = "", *, clock: Optional[Clock] = None) -> PassengerDocument:
    """Blank document, prefilled with the passenger's date of birth when known."""
    return recompute_document(PassengerDocument(date_of_birth=date_of_birth or ""), clock=clock)
