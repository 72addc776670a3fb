"""JSON export of amortization schedules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter

from loan_backend.models import ScheduleEntry

_SCHEDULE_ADAPTER = TypeAdapter(List[ScheduleEntry])


def schedule_to_records(schedule: Sequence[ScheduleEntry]) -> List[dict]:
    return [entry.model_dump() for entry in schedule]


def schedule_to_json(schedule: Sequence[ScheduleEntry], indent: int = 2) -> str:
    """One object per month with the fields month, payment, interest, principal, remaining."""
    return json.dumps(schedule_to_records(schedule), indent=indent)


def schedule_from_json(text: Union[str, bytes]) -> List[ScheduleEntry]:
    return _SCHEDULE_ADAPTER.validate_json(text)


def write_schedule(path: Union[str, Path], schedule: Sequence[ScheduleEntry]) -> Path:
    path = Path(path)
    path.write_text(schedule_to_json(schedule), encoding="utf-8")
    return path


def read_schedule(path: Union[str, Path]) -> List[ScheduleEntry]:
    return schedule_from_json(Path(path).read_text(encoding="utf-8"))
