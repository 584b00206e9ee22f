from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal in Python, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
NonNegativeMoney = Annotated[Money, Field(ge=0)]


class APIModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Unknown keys are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class ErrorRead(APIModel):
    message: str
    code: str
    field: Optional[str] = None
    details: Optional[Any] = None


class MessageRead(APIModel):
    message: str
