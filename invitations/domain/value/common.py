"""Value object base."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Frozen, equal-by-content payloads such as forms and navigation results."""

    model_config = ConfigDict(frozen=True)
