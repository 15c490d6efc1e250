from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Session_Phase(Enum):
    LOADING = "loading"
    PRESENTING = "presenting"
    SUMMARY = "summary"


class Commit_Phase(Enum):
    IDLE = "idle"
    ANIMATING = "animating"  # card is flying off-screen, input is ignored


class Affordance(Enum):
    NONE = "none"
    LIKE = "like"
    DISLIKE = "dislike"


class Pointer_Kind(Enum):
    TOUCH = "touch"
    MOUSE = "mouse"


@dataclass
class Pointer_Event:
    kind: Pointer_Kind
    x: float


@dataclass
class Deck:
    items: list[str] = field(default_factory=list)
    cursor: int = 0
    accepted: list[str] = field(default_factory=list)  # Liked urls, in decision order


@dataclass
class Drag_State:
    origin_x: float = 0.0
    current_x: float = 0.0
    active: bool = False
    kind: Pointer_Kind | None = None
    suppress_default: bool = False  # Touch drag went far enough to block scrolling


@dataclass
class Card_View:
    x: float = 0.0
    rotation: float = 0.0
    target_x: float = 0.0
    target_rotation: float = 0.0
    animated: bool = False
