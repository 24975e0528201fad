from pydantic import BaseModel, Field
from typing import Dict, Any, List

class BookingCheckResponse(BaseModel):
    valid: bool
    data: Dict[str, Any] = Field(default_factory=dict)
    checks: Dict[str, str]
    errors: List[str] = Field(default_factory=list)
