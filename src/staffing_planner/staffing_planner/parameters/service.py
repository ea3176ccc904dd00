from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import require_int
from .model import SystemParameters
from .repository import ParameterRepository

logger = logging.getLogger(__name__)


class ParameterService:
    """Use case: read and edit the global tuning parameters.

    ``defaults`` is what the planner runs with while nothing is stored yet.
    """

    def __init__(self, parameters: ParameterRepository, *, defaults: Optional[SystemParameters] = None):
        self._parameters = parameters
        self._defaults = defaults or SystemParameters()

    def get(self) -> SystemParameters:
        return self._parameters.get() or self._defaults

    def save(self, *, attendance_duration: Any, standard_break_time: Any, average_response_rate: Any) -> SystemParameters:
        values = {
            "attendance_duration": require_int(attendance_duration, "Attendance duration", minimum=1, maximum=1440),
            "standard_break_time": require_int(standard_break_time, "Standard break time", minimum=1),
            "average_response_rate": require_int(average_response_rate, "Average response rate", minimum=1),
        }

        current = self._parameters.get()
        if current and current.parameters_id is not None:
            self._parameters.update(parameters_id=current.parameters_id, **values)
            parameters_id = current.parameters_id
        else:
            parameters_id = self._parameters.insert(**values)

        logger.info("system parameters saved: %s", values)
        return SystemParameters(parameters_id=parameters_id, **values)
