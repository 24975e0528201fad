import pytest
from datetime import date, datetime
from pydantic import ValidationError
from booking_rules.domain.logic.document_recompute import (
    recompute_document,
    update_document_field,
    new_document,
)
from booking_rules.domain.models.passport import PassengerDocument, DocumentStatus


@pytest.fixture
def complete_fields():
    return {
        'passport_number': 'K1234567',
        'issue_date': '2020-03-01',
        'expiry_date': '2030-03-01',
        'date_of_birth': '1988-07-04',
    }


def fill(document, fields, clock, travel_date=None):
    for name, value in fields.items():
        document = update_document_field(document, name, value, travel_date, clock=clock)
    return document


def test_new_document_is_empty(clock):
    doc = new_document(clock=clock)
    assert doc.status is DocumentStatus.EMPTY
    assert not doc.is_eligible
    assert doc.remaining_validity_months == 0


def test_new_document_prefills_date_of_birth(clock):
    doc = new_document("1988-07-04", clock=clock)
    assert doc.date_of_birth == "1988-07-04"
    assert doc.status is DocumentStatus.PARTIALLY_ENTERED


def test_complete_document_is_eligible(clock, complete_fields):
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.ELIGIBLE
    assert doc.is_eligible
    assert not doc.renewal_required
    assert doc.remaining_validity_months > 6
    assert doc.errors == []


def test_partially_entered_until_all_required_fields_set(clock, complete_fields):
    doc = new_document(clock=clock)
    doc = update_document_field(doc, 'passport_number', 'K1234567', clock=clock)
    assert doc.status is DocumentStatus.PARTIALLY_ENTERED
    doc = update_document_field(doc, 'expiry_date', '2030-03-01', clock=clock)
    assert doc.status is DocumentStatus.PARTIALLY_ENTERED
    # Eligibility follows the expiry even before the form is complete
    assert doc.is_eligible


def test_expiry_change_rederives_fields(clock, complete_fields):
    doc = fill(new_document(clock=clock), complete_fields, clock)
    doc = update_document_field(doc, 'expiry_date', '2025-04-01', clock=clock)
    assert doc.status is DocumentStatus.RENEWAL_REQUIRED
    assert doc.renewal_required
    assert not doc.is_eligible
    assert doc.remaining_validity_months == 3


def test_expired_passport(clock, complete_fields):
    complete_fields['expiry_date'] = '2024-12-31'
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.RENEWAL_REQUIRED
    assert doc.remaining_validity_months == 0
    assert "Passport has already expired" in doc.errors


def test_invalid_passport_number(clock, complete_fields):
    complete_fields['passport_number'] = 'K12'
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.INVALID
    assert not doc.is_eligible
    assert "Invalid passport number format" in doc.errors


def test_passport_number_uppercased_on_write(clock):
    doc = update_document_field(new_document(clock=clock), 'passport_number', ' k1234567 ', clock=clock)
    assert doc.passport_number == 'K1234567'


def test_issue_date_after_expiry(clock, complete_fields):
    complete_fields['issue_date'] = '2031-01-01'
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.INVALID
    assert "Issue date must be before expiry date" in doc.errors
    assert "Issue date cannot be in the future" in doc.errors


def test_unparseable_expiry_is_invalid_not_renewal(clock, complete_fields):
    complete_fields['expiry_date'] = 'soon'
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.INVALID
    assert "Passport expiry date is not a valid date" in doc.errors


def test_future_date_of_birth(clock, complete_fields):
    complete_fields['date_of_birth'] = '2026-01-01'
    doc = fill(new_document(clock=clock), complete_fields, clock)
    assert doc.status is DocumentStatus.INVALID
    assert "Date of birth cannot be in the future" in doc.errors


def test_travel_date_can_make_document_ineligible(clock, complete_fields):
    complete_fields['expiry_date'] = '2026-01-15'
    doc = fill(new_document(clock=clock), complete_fields, clock, travel_date='2025-09-01')
    assert not doc.is_eligible
    assert not doc.renewal_required
    assert doc.status is DocumentStatus.INSUFFICIENT_VALIDITY


def test_update_returns_new_document(clock):
    original = new_document(clock=clock)
    updated = update_document_field(original, 'expiry_date', '2030-03-01', clock=clock)
    assert original.expiry_date == ''
    assert not original.is_eligible
    assert updated.is_eligible


@pytest.mark.parametrize("field", ['is_eligible', 'remaining_validity_months', 'status', 'nickname'])
def test_derived_or_unknown_fields_cannot_be_written(clock, field):
    with pytest.raises(ValueError):
        update_document_field(new_document(clock=clock), field, True, clock=clock)


def test_document_is_immutable(clock):
    doc = new_document(clock=clock)
    with pytest.raises(ValidationError):
        doc.is_eligible = True


def test_recompute_fixes_stale_derived_fields(clock, complete_fields):
    stale = PassengerDocument(**complete_fields, is_eligible=False, remaining_validity_months=0)
    fresh = recompute_document(stale, clock=clock)
    assert fresh.is_eligible
    assert fresh.status is DocumentStatus.ELIGIBLE


def test_date_values_are_stored_as_iso_text(clock, complete_fields):
    doc = fill(new_document(clock=clock), complete_fields, clock)
    doc = update_document_field(doc, 'expiry_date', date(2030, 3, 1), clock=clock)
    assert doc.expiry_date == '2030-03-01'
    assert doc.status is DocumentStatus.ELIGIBLE
    doc = update_document_field(doc, 'issue_date', datetime(2020, 3, 1, 9, 30), clock=clock)
    assert doc.issue_date == '2020-03-01T09:30:00'
    assert doc.errors == []


def test_date_value_can_make_document_expired(clock):
    doc = update_document_field(new_document(clock=clock), 'expiry_date', date(2024, 12, 31), clock=clock)
    assert doc.renewal_required
    assert "Passport has already expired" in doc.errors
