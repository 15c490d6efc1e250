from __future__ import annotations
from typing import Callable

from cat_swipe.config import tweak
from cat_swipe.models import Affordance, Drag_State, Pointer_Event, Pointer_Kind
from cat_swipe.surface import Surface


def classify_delta(delta: float, threshold: float) -> Affordance:
    """Which way a horizontal displacement points, once it's past `threshold`."""
    if delta > threshold:
        return Affordance.LIKE
    if delta < -threshold:
        return Affordance.DISLIKE
    return Affordance.NONE


class Gesture_Tracker:
    """Turns touch and mouse drags into live card feedback and like/dislike commits.

    Both pointer kinds go through the same start/move/end/leave calls; a
    gesture belongs to the pointer kind that started it.
    """

    def __init__(self, surface: Surface, on_commit: Callable[[bool], object], settings: dict = tweak):
        self.surface = surface
        self.on_commit = on_commit
        self.settings = settings
        self.drag = Drag_State()

    @property
    def delta(self) -> float:
        return self.drag.current_x - self.drag.origin_x

    def start(self, event: Pointer_Event) -> None:
        drag = self.drag
        drag.origin_x = event.x
        drag.current_x = event.x
        drag.active = True
        drag.kind = event.kind
        drag.suppress_default = False

    def move(self, event: Pointer_Event) -> bool:
        """Follow the pointer. Returns True when the platform should stop scrolling."""
        drag = self.drag
        if not drag.active or event.kind != drag.kind:
            return False

        drag.current_x = event.x
        delta = self.delta

        # stop vertical scroll if swiping horizontally
        if event.kind == Pointer_Kind.TOUCH and abs(delta) > self.settings["scroll_epsilon"]:
            drag.suppress_default = True

        self.surface.apply_transform(delta, delta / self.settings["rotation_divisor"])
        self.surface.set_affordance(classify_delta(delta, self.settings["like_threshold"]))
        return drag.suppress_default

    def end(self, event: Pointer_Event | None = None) -> Affordance:
        """Release the card: commit past the threshold, otherwise snap back."""
        drag = self.drag
        if not drag.active:
            return Affordance.NONE
        if event is not None and event.kind == drag.kind:
            drag.current_x = event.x

        outcome = classify_delta(self.delta, self.settings["commit_threshold"])
        self.reset()

        if outcome == Affordance.NONE:
            self.cancel()
        else:
            self.on_commit(outcome == Affordance.LIKE)
        return outcome

    def leave(self) -> None:
        """Pointer left the window mid-drag: same as letting go short."""
        if self.drag.active:
            self.reset()
            self.cancel()

    def cancel(self) -> None:
        self.surface.apply_transform(0, 0, animated=True)
        self.surface.set_affordance(Affordance.NONE)

    def reset(self) -> None:
        self.drag = Drag_State()
