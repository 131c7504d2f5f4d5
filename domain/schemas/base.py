"""Base schema configuration for request and response DTOs.

Field names are snake_case in Python and camelCase on the wire.

Usage:
    - APIRequest: For incoming request bodies and query models
    - APIResponse: For outgoing response bodies
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        ser_json_bytes="base64",
        use_enum_values=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas; only declared fields are returned."""

    model_config = ConfigDict(extra="forbid", from_attributes=True)
