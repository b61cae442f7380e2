"""Check outcome data models."""

from pydantic import BaseModel, ConfigDict, Field


class CheckOutcome(BaseModel):
    """Result of checking one origin. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    url: str
    detected: bool = False  # manifest retrieved and parsed as JSON
    valid: bool = False  # detected and passed schema validation
    version: str = ""
    tool_count: int = 0
    tool_names: str = ""
    error: str = ""


class BatchResult(BaseModel):
    """Ordered outcomes of a batch run."""

    model_config = ConfigDict(frozen=True)

    outcomes: tuple[CheckOutcome, ...] = Field(default_factory=tuple)
    detected_count: int = 0

    @property
    def total(self) -> int:
        return len(self.outcomes)
