from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def update_config(self, student_id: int, partial_config: Mapping[str, Any]) -> None:
        """Apply a partial settings update (keys are StudentConfig field names)."""

        raise NotImplementedError
