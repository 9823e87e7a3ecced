from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RejectionReason(str, Enum):
    EMPTY = "empty"
    OUT_OF_RANGE_NUMBER = "out_of_range_number"
    INVALID_LETTER_OR_FORMAT = "invalid_letter_or_format"


@dataclass(frozen=True, slots=True)
class Selection:
    index: int


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectionReason


ParsedAnswer = Selection | Rejected
