"""
Animation step variants

A step script is an ordered list of these values. Each step consumes the
text produced by its predecessor; none of them carries text state itself.
"""

from dataclasses import dataclass
from typing import ClassVar, Union
from models.enums import StepType


@dataclass(frozen=True)
class TypeStep:
    """Append `text` one character at a time"""
    text: str
    kind: ClassVar[StepType] = StepType.TYPE


@dataclass(frozen=True)
class DeleteStep:
    """Remove `count` trailing characters one at a time"""
    count: int
    kind: ClassVar[StepType] = StepType.DELETE


@dataclass(frozen=True)
class AppendStep:
    """Same timing and reveal as TypeStep; marks a suffix addition"""
    text: str
    kind: ClassVar[StepType] = StepType.APPEND


@dataclass(frozen=True)
class PrependStep:
    """Insert `text` in front of the current text, rightmost character first"""
    text: str
    kind: ClassVar[StepType] = StepType.PREPEND


@dataclass(frozen=True)
class PauseStep:
    """Hold the current text for `duration` milliseconds"""
    duration: float
    kind: ClassVar[StepType] = StepType.PAUSE


AnimationStep = Union[TypeStep, DeleteStep, AppendStep, PrependStep, PauseStep]


def describe_step(step: AnimationStep) -> str:
    """Short human-readable form, used by the CLI and debug logs"""
    if isinstance(step, (TypeStep, AppendStep, PrependStep)):
        return f"{step.kind.value}({step.text!r})"
    if isinstance(step, DeleteStep):
        return f"delete({step.count})"
    return f"pause({step.duration:g}ms)"
