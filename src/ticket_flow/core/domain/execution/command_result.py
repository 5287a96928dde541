"""Outcome of a command or pipeline run.

A result is either a ``Success`` or a ``Failure``; the variant is the discriminator.
Both carry the same optional step diagnostics, which a pipeline runner attaches
after the fact with ``with_step``:

- ``failed_step``: 1-based index of the step that produced the result, 0 if unknown
- ``total_steps``: number of steps in the pipeline, 0 if unknown
- ``step_name``: human-readable label of that step, empty if unknown
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Self, TypeAlias


@dataclass(frozen=True, slots=True)
class _StepDiagnostics:
    message: str
    failed_step: int = field(default=0, kw_only=True)
    total_steps: int = field(default=0, kw_only=True)
    step_name: str = field(default="", kw_only=True)

    def with_step(
        self,
        *,
        failed_step: int | None = None,
        total_steps: int | None = None,
        step_name: str | None = None,
    ) -> Self:
        """Return a copy carrying the given step diagnostics. ``None`` keeps the current value."""
        changes: dict[str, int | str] = {}
        if failed_step is not None:
            changes["failed_step"] = failed_step
        if total_steps is not None:
            changes["total_steps"] = total_steps
        if step_name is not None:
            changes["step_name"] = step_name
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class Success(_StepDiagnostics):
    is_success: ClassVar[bool] = True

    @property
    def exception(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Failure(_StepDiagnostics):
    exception: BaseException | None = None

    is_success: ClassVar[bool] = False


CommandResult: TypeAlias = Success | Failure


def ok(message: str) -> Success:
    return Success(message)


def fail(message: str, exception: BaseException | None = None) -> Failure:
    return Failure(message, exception)
