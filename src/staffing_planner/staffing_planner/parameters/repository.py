from __future__ import annotations

from typing import Optional, Protocol

from .model import SystemParameters


class ParameterRepository(Protocol):
    def get(self) -> Optional[SystemParameters]:
        """The single stored parameter row, if any."""

        raise NotImplementedError

    def insert(self, *, attendance_duration: int, standard_break_time: int, average_response_rate: int) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        parameters_id: int,
        attendance_duration: int,
        standard_break_time: int,
        average_response_rate: int,
    ) -> bool:
        raise NotImplementedError
