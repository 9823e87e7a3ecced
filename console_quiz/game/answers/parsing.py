from __future__ import annotations

import re

from console_quiz.game.answers.types import ParsedAnswer, Rejected, RejectionReason, Selection

# \d covers every Unicode decimal digit, which int() also accepts
NUMERIC_ANSWER_RE = re.compile(r"[+-]?\d+")
FIRST_LETTER_ORD = ord("A")


def option_letter(index: int) -> str:
    return chr(FIRST_LETTER_ORD + index)


def _parse_number(text: str, option_count: int) -> ParsedAnswer:
    try:
        number = int(text)
    except ValueError:
        # longer than the interpreter allows for int() conversion
        return Rejected(reason=RejectionReason.OUT_OF_RANGE_NUMBER)
    if 1 <= number <= option_count:
        return Selection(index=number - 1)
    return Rejected(reason=RejectionReason.OUT_OF_RANGE_NUMBER)


def _parse_letter(text: str, option_count: int) -> ParsedAnswer:
    letter = text[0].upper()
    # some characters expand when uppercased ("ß" -> "SS")
    if len(letter) != 1:
        return Rejected(reason=RejectionReason.INVALID_LETTER_OR_FORMAT)
    index = ord(letter) - FIRST_LETTER_ORD
    if 0 <= index < option_count:
        return Selection(index=index)
    return Rejected(reason=RejectionReason.INVALID_LETTER_OR_FORMAT)


def parse_answer(raw_input: str, option_count: int) -> ParsedAnswer:
    """Turn one line of user input into a zero-based selection.

    Accepts a 1-based option number or an option letter (case-insensitive,
    only the first character counts). Anything else is rejected and the
    caller is expected to prompt again.
    """
    text = raw_input.strip()
    if not text:
        return Rejected(reason=RejectionReason.EMPTY)
    if NUMERIC_ANSWER_RE.fullmatch(text):
        return _parse_number(text, option_count)
    return _parse_letter(text, option_count)
