"""
Input validation schemas using Pydantic v2
Validates competition settings and expected-timeline fixtures
"""

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .types import Event

logger = logging.getLogger(__name__)


class InvalidDurationError(ValueError):
    """Competition duration is negative or not a number."""


# ==================== SETTINGS ====================


class CompetitionSettings(BaseModel):
    """Validated construction arguments of a Competition"""

    competitors: Dict[str, Callable[..., Any]] = Field(
        default_factory=dict, description="Competitor name -> rate function"
    )
    duration: float = Field(..., ge=0, description="Competition length (simulated units)")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("duration")
    @classmethod
    def validate_duration_is_number(cls, v: float) -> float:
        """NaN passes the ge=0 bound check; reject it here"""
        if math.isnan(v):
            raise ValueError("duration must be a number")
        return v


# ==================== FIXTURES ====================


class ExpectedEvent(BaseModel):
    """One entry of an expected timeline, as stored in fixture files"""

    elapsedTime: float = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    totalHotDogsEaten: float = Field(..., ge=0)

    model_config = ConfigDict(extra="ignore")

    def to_event(self) -> Event:
        return Event(self.elapsedTime, self.name, self.totalHotDogsEaten)


class InputSanitizer:
    """Utility class turning raw inputs into validated values"""

    @staticmethod
    def validate_settings(
        competitors: Mapping[str, Callable[..., Any]] | None,
        duration: Union[float, int, str],
    ) -> CompetitionSettings:
        """
        Validate Competition constructor arguments

        Returns:
            CompetitionSettings: validated settings

        Raises:
            InvalidDurationError: if duration is negative or not numeric
            ValueError: if a rate function is not callable
        """
        try:
            return CompetitionSettings(
                competitors=dict(competitors or {}), duration=duration
            )
        except ValidationError as e:
            logger.warning(f"Competition settings rejected: {e}")
            if any(err["loc"][:1] == ("duration",) for err in e.errors()):
                raise InvalidDurationError(f"Invalid duration {duration!r}: {e}") from e
            raise ValueError(f"Invalid competitors: {e}") from e

    @staticmethod
    def parse_expected_events(records: List[Dict[str, Any]]) -> List[Event]:
        """
        Convert fixture dicts into Events (numeric strings are accepted)

        Raises:
            ValueError: if any record is malformed
        """
        events: List[Event] = []
        for i, record in enumerate(records):
            try:
                events.append(ExpectedEvent.model_validate(record).to_event())
            except ValidationError as e:
                logger.warning(f"Expected event {i} rejected: {e}")
                raise ValueError(f"Invalid expected event {i}: {e}") from e
        return events


# ==================== EXPORT ====================

__all__ = [
    "CompetitionSettings",
    "ExpectedEvent",
    "InputSanitizer",
    "InvalidDurationError",
]
