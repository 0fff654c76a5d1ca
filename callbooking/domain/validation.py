"""
A small validation pipeline.

A pipeline is an ordered list of steps. Each step receives the value
produced by the previous one and either returns a (possibly transformed)
value or raises a ``FieldValidationError`` tagged with a field path.
Refinements placed after a transform therefore see the transformed value.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List

from .exceptions import FieldValidationError, FormValidationError

Step = Callable[[Any], Any]


@dataclass
class ValidationPipeline:
    """
    Runs steps in order and stops at the first failure.
    """
    steps: List[Step] = field(default_factory=list)

    def then(self, step: Step) -> "ValidationPipeline":
        """Append a step and return the pipeline for chaining."""
        self.steps.append(step)
        return self

    def run(self, value: Any) -> Any:
        """
        Run all steps against ``value``.

        Raises:
            FormValidationError: Wrapping the first failing step's error
        """
        for step in self.steps:
            try:
                value = step(value)
            except FieldValidationError as failure:
                raise FormValidationError([failure], extra_errors=row_errors(failure)) from failure
        return value


def row_errors(failure: FieldValidationError) -> Dict[str, str]:
    """Per-row error entries for failures that know which weekdays they concern."""
    week_days = getattr(failure, "week_days", None) or []
    return {f"{failure.path}.{day}.endTime": failure.message for day in week_days}


def collect_field_errors(checks: Iterable[Callable[[], None]]) -> None:
    """
    Run independent field checks and report every failure at once.

    Args:
        checks: Callables raising ``FieldValidationError`` when their
            field is invalid

    Raises:
        FormValidationError: If any check failed
    """
    failures: List[FieldValidationError] = []
    for check in checks:
        try:
            check()
        except FieldValidationError as failure:
            failures.append(failure)

    if failures:
        raise FormValidationError(failures)
