from __future__ import annotations

from typing import Protocol, Sequence

from .model import SeatingGroup


class SeatingRepository(Protocol):
    def list_for_exam(self, exam_id: str) -> Sequence[SeatingGroup]:
        raise NotImplementedError
