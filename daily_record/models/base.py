"""
Base model configuration
Shared pydantic configuration for API request and response models
"""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """Base model for request/response payloads.

    This base model configuration:
    - Keeps snake_case field names on the wire (date, start_time, event_name, ...)
    - Forbids unknown fields to ensure type safety
    """

    model_config = ConfigDict(
        populate_by_name=True,
        # By default, pydantic allows unknown fields.
        #
        # See: <https://docs.pydantic.dev/2.10/concepts/models/#extra-data>
        extra="forbid",
    )
