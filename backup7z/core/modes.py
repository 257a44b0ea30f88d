from __future__ import annotations

from enum import Enum


class RequestedMode(Enum):
    AUTO = "Auto"
    FULL_NEW = "FullNew"
    FULL_UPDATE = "FullUpdate"
    DIFF = "Diff"


class ExecutionMode(Enum):
    NEW_FULL = "new-full"
    UPDATE_FULL = "update-full"
    DIFFERENTIAL = "differential"


class Compression(Enum):
    NONE = "None"
    FAST = "Fast"

    @property
    def switch(self) -> str:
        return "-mx0" if self is Compression.NONE else "-mx1"
