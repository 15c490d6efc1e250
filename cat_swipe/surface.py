from __future__ import annotations
from cat_swipe.models import Affordance, Session_Phase


class Surface:
    """What the session needs from whatever draws the cards."""

    def reset(self) -> None:
        pass

    def show_view(self, phase: Session_Phase) -> None:
        pass

    def show_message(self, text: str) -> None:
        print("Surface:", text)

    def set_busy(self, busy: bool) -> None:
        pass

    async def load_image(self, url: str) -> bool:
        """Prepare `url` for display. False if it can't be shown."""
        raise NotImplementedError

    def set_image(self, url: str) -> None:
        raise NotImplementedError

    def apply_transform(self, translate_x: float, rotate_deg: float, animated: bool = False) -> None:
        pass

    def set_affordance(self, affordance: Affordance) -> None:
        pass

    def show_summary(self, accepted: list[str], total: int) -> None:
        raise NotImplementedError
