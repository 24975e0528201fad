import re
from typing import Tuple
from booking_rules.core.config import settings
from booking_rules.domain.models.booking import ContactDetails


def check_contact_details(contact: ContactDetails) -> Tuple[bool, str]:
    """
    Return (ok: bool, message: str)
    """
    if not (contact.name and contact.email and contact.phone and contact.address):
        return False, "Please fill in all required fields."

    if not re.match(settings.contact_config['email_pattern'], contact.email):
        return False, "Please enter a valid email address."

    # Separators and spaces are tolerated, only the digits count
    digits = re.sub(r'\D', '', contact.phone)
    if len(digits) != settings.contact_config['phone_digits']:
        return False, f"Please enter a valid {settings.contact_config['phone_digits']}-digit phone number."

    return True, "Contact details OK"
