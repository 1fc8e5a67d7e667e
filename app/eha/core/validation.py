"""Name and TTL validation.

Names must end in an allowed local suffix and consist of valid DNS labels.
The check_* functions classify input and never raise; the validate_*
wrappers raise ValidationError for callers that prefer exceptions.
"""

from dataclasses import dataclass

from eha.core.errors import EhaError
from eha.models.request import MAX_TTL_MINUTES, MIN_TTL_MINUTES, AddRequest, Request, RemoveRequest

ALLOWED_SUFFIXES = (".local", ".localhost")
MAX_LABEL_LENGTH = 63


@dataclass(frozen=True, slots=True)
class InvalidSuffix:
    """Name does not end with an allowed suffix."""

    name: str

    @property
    def message(self) -> str:
        return f"name must end in {' or '.join(ALLOWED_SUFFIXES)}: {self.name!r}"


@dataclass(frozen=True, slots=True)
class EmptyLabel:
    """Label at ``index`` is empty (leading, trailing or doubled dot)."""

    index: int

    @property
    def message(self) -> str:
        return f"invalid DNS name part #{self.index}: cannot be empty"


@dataclass(frozen=True, slots=True)
class InvalidLabelChar:
    """First offending character of a label.

    Attributes:
        label_index: Index of the label within the name.
        char_index: Index of the character within the label.
        char: The offending character.
        reason: Which label rule was violated.
    """

    label_index: int
    char_index: int
    char: str
    reason: str = "invalid character"

    @property
    def message(self) -> str:
        return (
            f"invalid DNS name char in part #{self.label_index} "
            f"@ {self.char_index}: {self.char!r} ({self.reason})"
        )


@dataclass(frozen=True, slots=True)
class TtlOutOfRange:
    """Requested TTL is outside the accepted range."""

    minutes: int

    @property
    def message(self) -> str:
        return (
            f"ttl minutes must be between {MIN_TTL_MINUTES} and {MAX_TTL_MINUTES} "
            f"(1m to 365d inclusive), got {self.minutes}"
        )


NameProblem = InvalidSuffix | EmptyLabel | InvalidLabelChar
Problem = NameProblem | TtlOutOfRange


class ValidationError(EhaError):
    """Raised when a request fails validation.

    Attributes:
        problem: The classified validation failure.
    """

    def __init__(self, problem: Problem) -> None:
        super().__init__(problem.message)
        self.problem = problem


def _check_label(label: str, label_index: int) -> InvalidLabelChar | None:
    """Return the first rule violation in a single label, if any."""
    if len(label) > MAX_LABEL_LENGTH:
        return InvalidLabelChar(
            label_index,
            MAX_LABEL_LENGTH,
            label[MAX_LABEL_LENGTH],
            f"label longer than {MAX_LABEL_LENGTH} characters",
        )

    last = len(label) - 1
    for char_index, char in enumerate(label):
        if char == "-" and char_index in (0, last):
            return InvalidLabelChar(
                label_index, char_index, char, "label cannot start or end with '-'"
            )
        if not (char.isascii() and char.isalnum()) and char != "-":
            return InvalidLabelChar(label_index, char_index, char)

    return None


def check_name(name: str) -> NameProblem | None:
    """Classify a candidate name.

    Rules are checked in order and the first failure wins: allowed suffix,
    then no empty labels, then per-label length, hyphen placement and
    character set.

    Args:
        name: Candidate DNS name.

    Returns:
        The first problem found, or None if the name is valid.
    """
    if not name.endswith(ALLOWED_SUFFIXES):
        return InvalidSuffix(name)

    labels = name.split(".")
    for index, label in enumerate(labels):
        if not label:
            return EmptyLabel(index)

    for index, label in enumerate(labels):
        problem = _check_label(label, index)
        if problem is not None:
            return problem

    return None


def check_ttl(minutes: int) -> TtlOutOfRange | None:
    """Classify a TTL in minutes; valid range is inclusive on both ends."""
    if not MIN_TTL_MINUTES <= minutes <= MAX_TTL_MINUTES:
        return TtlOutOfRange(minutes)
    return None


def validate_name(name: str) -> None:
    """Raise ValidationError if ``name`` is not acceptable."""
    problem = check_name(name)
    if problem is not None:
        raise ValidationError(problem)


def validate_ttl(minutes: int) -> None:
    """Raise ValidationError if ``minutes`` is out of range."""
    problem = check_ttl(minutes)
    if problem is not None:
        raise ValidationError(problem)


def validate_request(request: Request) -> None:
    """Validate a request before any file I/O happens.

    Add requests check the name and then the TTL; remove requests check the
    name only. Prune requests carry nothing to validate.

    Raises:
        ValidationError: On the first failing check.
    """
    if isinstance(request, AddRequest):
        validate_name(request.name)
        validate_ttl(request.ttl_minutes)
    elif isinstance(request, RemoveRequest):
        validate_name(request.name)
