"""Tagged analyzer outcomes.

Every analyzer returns either ``Success`` (a computed score) or ``Degraded``
(the check could not run, so the neutral score applies).  Both collapse to the
same ``{score, details, ...}`` metric shape for the response payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Union

NEUTRAL_SCORE = 100


class DegradedReason(str, Enum):
    UNCONFIGURED = "unconfigured"
    PROVIDER_FAILURE = "provider_failure"


@dataclass(frozen=True)
class Success:
    score: int
    details: str
    extras: Dict[str, Any] = field(default_factory=dict)

    degraded: ClassVar[bool] = False

    def to_metric(self) -> Dict[str, Any]:
        return {"score": self.score, "details": self.details, **self.extras}


@dataclass(frozen=True)
class Degraded:
    reason: DegradedReason
    details: str
    extras: Dict[str, Any] = field(default_factory=dict)

    degraded: ClassVar[bool] = True
    score: ClassVar[int] = NEUTRAL_SCORE

    def to_metric(self) -> Dict[str, Any]:
        return {"score": self.score, "details": self.details, **self.extras}


AnalyzerOutcome = Union[Success, Degraded]
