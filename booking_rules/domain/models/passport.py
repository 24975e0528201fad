from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date


class PassportValidation(BaseModel):
    """Result of an expiry check. Violations are reported in `errors`, never raised."""
    is_valid: bool
    remaining_months: int = 0
    renewal_required: bool = True
    errors: List[str] = Field(default_factory=list)


class DateOfBirthValidation(BaseModel):
    is_valid: bool
    error: Optional[str] = None


class ValidityStatus(str, Enum):
    VALID = "valid"
    EXPIRING_SOON = "expiring_soon"
    RENEWAL_REQUIRED = "renewal_required"

    @property
    def label(self) -> str:
        return {
            'valid': 'Valid',
            'expiring_soon': 'Expiring Soon',
            'renewal_required': 'Renewal Required'
        }[self.value]


class DocumentStatus(str, Enum):
    EMPTY = "empty"
    PARTIALLY_ENTERED = "partially_entered"
    ELIGIBLE = "eligible"
    RENEWAL_REQUIRED = "renewal_required"
    # Data is fine, but the passport lapses too soon after the travel date
    INSUFFICIENT_VALIDITY = "insufficient_validity"
    INVALID = "invalid"


# Fields a form may write; everything else on the document is derived.
EDITABLE_FIELDS = (
    'passport_number',
    'front_image',
    'back_image',
    'issue_date',
    'expiry_date',
    'date_of_birth',
)

# Fields that must all be filled for the document to count as complete.
REQUIRED_FIELDS = ('passport_number', 'issue_date', 'expiry_date', 'date_of_birth')


class PassengerDocument(BaseModel):
    """
    Passport details captured for one passenger of a booking draft.

    The derived fields (`is_eligible`, `remaining_validity_months`,
    `renewal_required`, `errors`, `status`) are only meant to be produced by
    `recompute_document`; build new documents through `new_document` or
    `update_document_field` rather than assigning them.
    """

    passport_number: str = Field("", description="Passport number, stored uppercase")
    front_image: str = Field("", description="Reference to the uploaded front page scan")
    back_image: str = Field("", description="Reference to the uploaded back page scan")
    issue_date: str = Field("", description="Issue date (YYYY-MM-DD)")
    expiry_date: str = Field("", description="Expiry date (YYYY-MM-DD)")
    date_of_birth: str = Field("", description="Date of birth (YYYY-MM-DD)")

    is_eligible: bool = False
    remaining_validity_months: int = Field(0, ge=0)
    renewal_required: bool = False
    errors: List[str] = Field(default_factory=list)
    status: DocumentStatus = DocumentStatus.EMPTY

    model_config = {"frozen": True}

    @field_validator('passport_number')
    @classmethod
    def normalize_passport_number(cls, v):
        return v.strip().upper()

    @field_validator('issue_date', 'expiry_date', 'date_of_birth', mode='before')
    @classmethod
    def date_to_iso(cls, v):
        # The form may hand over date values; they are stored as ISO text
        if isinstance(v, date):
            return v.isoformat()
        return v


class Passenger(BaseModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    nationality: str = "Indian"
    document: PassengerDocument = Field(default_factory=PassengerDocument)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
