import pytest
from booking_rules.domain.logic.contact_checker import check_contact_details
from booking_rules.domain.models.booking import ContactDetails


@pytest.fixture
def contact():
    return ContactDetails(
        name="Asha Rao",
        email="asha.rao@example.com",
        phone="98765-43210",
        address="12 Marine Drive, Mumbai"
    )


def test_valid_contact(contact):
    ok, msg = check_contact_details(contact)
    assert ok
    assert msg == "Contact details OK"


@pytest.mark.parametrize("field", ["name", "email", "phone", "address"])
def test_missing_field(contact, field):
    ok, msg = check_contact_details(contact.model_copy(update={field: ""}))
    assert not ok
    assert msg == "Please fill in all required fields."


@pytest.mark.parametrize("email", ["asha", "asha@example", "asha rao@example.com"])
def test_invalid_email(contact, email):
    ok, msg = check_contact_details(contact.model_copy(update={"email": email}))
    assert not ok
    assert "valid email" in msg


@pytest.mark.parametrize("phone", ["12345", "+91 98765 43210"])
def test_invalid_phone(contact, phone):
    ok, msg = check_contact_details(contact.model_copy(update={"phone": phone}))
    assert not ok
    assert msg == "Please enter a valid 10-digit phone number."
