from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class OutcomeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureReason(str, Enum):
    MISSING_FIELD = "missing_field"    # a required detail field is absent or empty
    DECLINED = "declined"              # simulated business-rule rejection
    DETAILS_ABSENT = "details_absent"  # dispatcher guard, no processor was called


class Outcome(BaseModel):
    """Terminal result of one payment attempt."""

    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    reason: Optional[FailureReason] = None
    field_name: Optional[str] = None
    message: str = ""

    @model_validator(mode="after")
    def check_shape(self) -> "Outcome":
        if self.status == OutcomeStatus.SUCCEEDED:
            if self.reason is not None or self.field_name is not None:
                raise ValueError("a succeeded outcome carries no failure reason")
            return self
        if self.reason is None:
            raise ValueError("a failed outcome must carry a reason")
        if (self.reason == FailureReason.MISSING_FIELD) != (self.field_name is not None):
            raise ValueError("field_name is set exactly for missing_field failures")
        return self

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED

    @classmethod
    def success(cls, message: str = "") -> "Outcome":
        return cls(status=OutcomeStatus.SUCCEEDED, message=message)

    @classmethod
    def missing_field(cls, field_name: str, message: str) -> "Outcome":
        return cls(
            status=OutcomeStatus.FAILED,
            reason=FailureReason.MISSING_FIELD,
            field_name=field_name,
            message=message,
        )

    @classmethod
    def declined(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.FAILED, reason=FailureReason.DECLINED, message=message)

    @classmethod
    def details_absent(cls) -> "Outcome":
        return cls(
            status=OutcomeStatus.FAILED,
            reason=FailureReason.DETAILS_ABSENT,
            message="Payment details are missing",
        )
