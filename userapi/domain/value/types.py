"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

from typing import Any

from pydantic import EmailStr, field_validator

from userapi.domain.value.common import RootValueObject


def normalize_email(value: str) -> str:
    """Canonical form used for email comparison and storage."""
    return value.strip().lower()


class Email(RootValueObject[EmailStr]):
    """Syntactically valid, normalized email address.

    Emails are compared case-insensitively, so the stored value is
    stripped and lower-cased. Two addresses differing only in case are
    the same Email.
    """

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        """Drop surrounding whitespace before syntax validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("root")
    @classmethod
    def lowercase(cls, v: str) -> str:
        """Lower-case the validated address."""
        return normalize_email(v)
