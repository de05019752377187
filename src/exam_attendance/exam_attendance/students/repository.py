from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        """All students ordered by name."""

        raise NotImplementedError

    def update_signature(self, *, student_id: str, signature: str) -> Optional[Student]:
        """Store the captured signature. Returns the updated student, None if unknown."""

        raise NotImplementedError
