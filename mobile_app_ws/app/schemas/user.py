"""
Pydantic models for user data.

Three shapes share the same wire vocabulary (camelCase field names):

* ``UserDetailsRequestModel`` – body of a create request.
* ``UpdateUserDetailsRequestModel`` – body of an update request; only
  the names can be changed.
* ``UserRest`` – a stored record as returned to clients, carrying the
  generated ``userId``.

The password is returned as stored, in plain text.  Do not point a
real client at this service.
"""

from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FIRST_NAME_MIN = 2
LAST_NAME_MIN = 2
PASSWORD_MIN = 8
PASSWORD_MAX = 16


def _check_email(value: str) -> str:
    """Reject anything that is not a bare address; return it unchanged."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateUserDetailsRequestModel(_CamelModel):
    """Schema for updating a user's names."""

    first_name: str = Field(..., min_length=FIRST_NAME_MIN, examples=["Jane"])
    last_name: str = Field(..., min_length=LAST_NAME_MIN, examples=["Doe"])


class UserDetailsRequestModel(UpdateUserDetailsRequestModel):
    """Schema for creating a user."""

    email: EmailAddress = Field(..., examples=["jan@example.com"])
    password: str = Field(
        ..., min_length=PASSWORD_MIN, max_length=PASSWORD_MAX, examples=["secret123"]
    )


class UserRest(_CamelModel):
    """Schema for reading a user from the API."""

    user_id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    password: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_details(cls, details: UserDetailsRequestModel, user_id: Optional[int] = None) -> "UserRest":
        """Copy the fields of a create request into a new record."""
        return cls(
            user_id=user_id,
            first_name=details.first_name,
            last_name=details.last_name,
            email=details.email,
            password=details.password,
        )

    def with_names(self, details: UpdateUserDetailsRequestModel) -> "UserRest":
        """Return a copy whose first and last name come from ``details``."""
        return self.model_copy(
            update={"first_name": details.first_name, "last_name": details.last_name}
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
