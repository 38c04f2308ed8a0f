from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from bs4.element import PageElement


@dataclass(frozen=True)
class Enter:
    node: PageElement


@dataclass(frozen=True)
class Exit:
    node: PageElement


WorkItem = Union[Enter, Exit]


@dataclass
class WalkResult:
    text: str
    items_processed: int
    peak_stack_depth: int
