from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator

RECORD_KEYS = ("question", "answer", "numberOfRepeats", "factor", "nextTime")


class CardRecord(BaseModel):
    """Wire form of a card: the five keys storage and transport agree on."""

    question: Optional[StrictStr]
    answer: Optional[StrictStr]
    repeat_count: StrictInt = Field(alias="numberOfRepeats", ge=0)
    ease_factor: float = Field(alias="factor")
    next_due: StrictInt = Field(alias="nextTime")

    @field_validator("ease_factor", mode="before")
    @classmethod
    def validate_factor(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("factor must be a number")
        if v <= 0:
            raise ValueError("factor must be positive")
        return v
