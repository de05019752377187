from __future__ import annotations

from typing import Protocol, Sequence

from .model import ExamSession


class ExamRepository(Protocol):
    def list_sessions(self) -> Sequence[ExamSession]:
        """All exam sessions with their center, ordered by date."""

        raise NotImplementedError
