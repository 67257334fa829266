"""API error response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorEntry(BaseModel):
    """One error exposed to the caller."""

    model_config = ConfigDict(frozen=True)

    code: str
    description: str | None = None
    parameters: tuple[str, ...] | None = None


class ErrorDocument(BaseModel):
    """Wire error payload: an unordered set of entries, de-duplicated by equality."""

    model_config = ConfigDict(frozen=True)

    errors: frozenset[ErrorEntry] = Field(default_factory=frozenset)


class FieldViolation(BaseModel):
    """Constraint violated by a field of the request payload."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ConstraintViolation(BaseModel):
    """Constraint violated outside the payload, e.g. by a query parameter."""

    model_config = ConfigDict(frozen=True)

    property_path: str
    message: str
