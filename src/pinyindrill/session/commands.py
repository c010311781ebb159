"""
練習指令

每個介面事件對應一個指令，由 SessionController.dispatch() 統一處理。
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SelectChapter:
    index: int


@dataclass(frozen=True)
class Submit:
    text: str


@dataclass(frozen=True)
class RequestHint:
    pass


@dataclass(frozen=True)
class ResetChapter:
    pass


@dataclass(frozen=True)
class ResetAll:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class SetAdvancedMode:
    enabled: bool


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


Command = Union[
    SelectChapter,
    Submit,
    RequestHint,
    ResetChapter,
    ResetAll,
    Back,
    SetAdvancedMode,
    Confirm,
    Cancel,
]
