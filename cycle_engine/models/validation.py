"""
Validation result model.
"""
from typing import List
from pydantic import BaseModel, Field

class ValidationResult(BaseModel):
    """
    Outcome of validating a candidate record. Every violated rule is
    reported, so callers can display all of them at once.
    """
    valid: bool
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))
