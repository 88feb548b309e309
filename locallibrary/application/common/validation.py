"""
Form validation and sanitization pipeline.

A pipeline is an ordered list of field rules plus a chain of sanitizers.
Sanitizers run on every submitted field regardless of the validation outcome,
and the sanitized values are what callers persist. Rules are checked against
the trimmed submitted value, and every failing rule is reported, not just
the first.

Example:
    pipeline = ValidationPipeline(
        [
            FieldRule("title", not_empty(), "Title must not be empty."),
            FieldRule("isbn", is_isbn(), "Invalid ISBN"),
        ]
    )
    sanitized, errors = pipeline.validate({"title": "  Emma ", "isbn": "123"})
    sanitized["title"]  # "Emma"
    errors.fields       # ["isbn"]
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from markupsafe import escape as escape_markup

FormValue = str | list[str]
RawInput = Mapping[str, FormValue | None]
SanitizedInput = dict[str, FormValue]

Constraint = Callable[[str], bool]
Sanitizer = Callable[[str], str]

_ISBN_SEPARATORS = re.compile(r"[\s-]")


# Sanitizers


def trim(value: str) -> str:
    """Strip leading and trailing whitespace."""
    return value.strip()


def escape(value: str) -> str:
    """
    Escape `&`, `<`, `>` and both quote characters.

    Every character of the input is kept, so a value that is non-empty
    before escaping stays non-empty after it.
    """
    return str(escape_markup(value))


DEFAULT_SANITIZERS: tuple[Sanitizer, ...] = (trim, escape)


# Constraints


def not_empty() -> Constraint:
    """Value must contain at least one character."""
    return length(min=1)


def length(min: int | None = None, max: int | None = None) -> Constraint:  # noqa: A002
    """Value length must fall within the inclusive ``[min, max]`` bounds."""

    def check(value: str) -> bool:
        if min is not None and len(value) < min:
            return False
        return not (max is not None and len(value) > max)

    return check


def is_valid_isbn(value: str) -> bool:
    """
    Check an ISBN-10 or ISBN-13, including its check digit.

    Spaces and hyphens are ignored.
    """
    digits = _ISBN_SEPARATORS.sub("", value).upper()

    if len(digits) == 10:
        if not digits[:9].isdigit() or not (digits[9].isdigit() or digits[9] == "X"):
            return False
        total = sum((10 - i) * int(ch) for i, ch in enumerate(digits[:9]))
        total += 10 if digits[9] == "X" else int(digits[9])
        return total % 11 == 0

    if len(digits) == 13 and digits.isdigit():
        total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(digits[:12]))
        return (10 - total % 10) % 10 == int(digits[12])

    return False


def is_isbn() -> Constraint:
    """Value must be a valid ISBN-10 or ISBN-13."""
    return is_valid_isbn


# Rules and errors


@dataclass(frozen=True)
class FieldRule:
    """A constraint on one form field with its failure message."""

    field: str
    constraint: Constraint
    message: str


@dataclass(frozen=True)
class FieldError:
    """A failed rule, carrying the sanitized value the user submitted."""

    field: str
    message: str
    value: FormValue = ""


@dataclass
class ErrorSet:
    """Ordered collection of field errors. Empty iff the submission is acceptable."""

    errors: list[FieldError] = field(default_factory=list)

    def add(self, error: FieldError) -> None:
        self.errors.append(error)

    def is_empty(self) -> bool:
        return not self.errors

    def __len__(self) -> int:
        return len(self.errors)

    @property
    def fields(self) -> list[str]:
        """Names of the failing fields, in rule order, without repeats."""
        return list(dict.fromkeys(error.field for error in self.errors))

    def as_list(self) -> list[FieldError]:
        return list(self.errors)

    def mapped(self) -> dict[str, FieldError]:
        """First error for each failing field."""
        mapping: dict[str, FieldError] = {}
        for error in self.errors:
            mapping.setdefault(error.field, error)
        return mapping


class ValidationPipeline:
    """Applies sanitizers and field rules to raw form input."""

    def __init__(
        self,
        rules: Sequence[FieldRule],
        sanitizers: Sequence[Sanitizer] = DEFAULT_SANITIZERS,
    ) -> None:
        self.rules = list(rules)
        self.sanitizers = list(sanitizers)

    def validate(self, raw: RawInput) -> tuple[SanitizedInput, ErrorSet]:
        """
        Sanitize every field and check every rule.

        Args:
            raw: Submitted form values; list values are handled element-wise

        Returns:
            Tuple of (sanitized input, error set)
        """
        sanitized: SanitizedInput = {
            name: self._sanitize_value(value) for name, value in raw.items() if value is not None
        }

        errors = ErrorSet()
        for rule in self.rules:
            if not self._passes(rule, raw.get(rule.field)):
                errors.add(FieldError(rule.field, rule.message, sanitized.get(rule.field, "")))

        return sanitized, errors

    def sanitize(self, value: str) -> str:
        for sanitizer in self.sanitizers:
            value = sanitizer(value)
        return value

    def _sanitize_value(self, value: FormValue) -> FormValue:
        if isinstance(value, list):
            return [self.sanitize(item) for item in value]
        return self.sanitize(value)

    @staticmethod
    def _passes(rule: FieldRule, value: FormValue | None) -> bool:
        if value is None:
            return rule.constraint("")
        if isinstance(value, list):
            return all(rule.constraint(item.strip()) for item in value)
        return rule.constraint(value.strip())
