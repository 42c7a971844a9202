"""Upload widget states. Exactly one holds at a time; each is replaced wholesale."""

from __future__ import annotations

from dataclasses import dataclass

from boardshot.core.moves import MoveResult
from boardshot.ui.intake import SelectedFile


@dataclass(slots=True, frozen=True)
class Idle:
    """Nothing selected (or the last selection was rejected)."""


@dataclass(slots=True, frozen=True)
class Pending:
    """A request for *preview* is in flight."""

    preview: SelectedFile


@dataclass(slots=True, frozen=True)
class Succeeded:
    preview: SelectedFile
    result: MoveResult


@dataclass(slots=True, frozen=True)
class Failed:
    """The last request ended in an error; *preview* stays visible if any."""

    preview: SelectedFile | None
    message: str


UploadState = Idle | Pending | Succeeded | Failed
