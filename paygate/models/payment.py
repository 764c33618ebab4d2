from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProcessorKind(str, Enum):
    WALLET_TRANSFER = "wallet_transfer"
    CARD_NETWORK = "card_network"
    BANK_TRANSFER = "bank_transfer"


class PaymentRequest(BaseModel):
    # amount and currency are only checked for presence
    amount: float
    currency: str
    details: Optional[dict[str, str]] = None


class ProcessorProfile(BaseModel):
    """
    Static configuration for one processor kind.

    required_fields is ordered: validation reports the first missing field
    in this order. field_labels maps a field name to the wording used in
    the "Missing <label>" log line; unlabelled fields fall back to the name.
    description_template is rendered with str.format_map against the
    payment details plus ``amount`` and ``currency``.
    """

    model_config = ConfigDict(frozen=True)

    kind: ProcessorKind
    display_name: str
    required_fields: tuple[str, ...] = Field(..., min_length=1)
    field_labels: dict[str, str] = Field(default_factory=dict)
    success_probability: float = Field(..., ge=0.0, le=1.0)
    primary_field: str
    description_template: str

    @model_validator(mode="after")
    def check_fields(self) -> "ProcessorProfile":
        if any(not name for name in self.required_fields):
            raise ValueError("required_fields must not contain empty names")
        if len(set(self.required_fields)) != len(self.required_fields):
            raise ValueError("required_fields must not contain duplicates")
        if self.primary_field not in self.required_fields:
            raise ValueError(
                f"primary_field {self.primary_field!r} is not a required field"
            )
        return self

    def label_for(self, field_name: str) -> str:
        return self.field_labels.get(field_name, field_name)


class PaymentSubmission(PaymentRequest):
    processor: ProcessorKind


class PaymentResponse(BaseModel):
    processor: ProcessorKind
    status: str
    reason: Optional[str] = None
    field_name: Optional[str] = None
    message: str
