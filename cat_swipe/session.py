from __future__ import annotations
import asyncio
import logging

from cat_swipe.config import tweak
from cat_swipe.deck import create_deck, current_item, is_finished, progress_text, record_decision, skip_current
from cat_swipe.gesture import Gesture_Tracker
from cat_swipe.image_source import Image_Source
from cat_swipe.models import Affordance, Commit_Phase, Deck, Pointer_Event, Session_Phase
from cat_swipe.preloader import Preloader
from cat_swipe.surface import Surface

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading cats..."
FAILED_MESSAGE = "Failed to load cats. Please check your connection and restart."
SKIP_MESSAGE = "Failed loading image, skipping to the next cat..."


class Session_Controller:
    """Runs one swipe session at a time: load a batch, show cards, record decisions, summarize.

    Every async continuation carries the generation it was started in. A
    restart bumps the generation, so anything still in flight from the old
    session finds itself stale and returns without touching the new deck.
    """

    def __init__(self, image_source: Image_Source, preloader: Preloader, surface: Surface,
                 settings: dict = tweak):
        self.image_source = image_source
        self.preloader = preloader
        self.surface = surface
        self.settings = settings

        self.deck = Deck()
        self.phase = Session_Phase.LOADING
        self.commit_phase = Commit_Phase.IDLE
        self.displayed_cursor = -1  # cursor whose image is on screen, -1 while loading
        self.generation = 0
        self.failed = False
        self.gestures = Gesture_Tracker(surface, self.request_decide, settings)
        self._tasks: set[asyncio.Task] = set()

    @property
    def drag(self):
        return self.gestures.drag

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _set_phase(self, phase: Session_Phase) -> None:
        self.phase = phase
        self.surface.show_view(phase)

    # --- Lifecycle ---

    def start(self) -> asyncio.Task:
        return self._spawn(self.initialize())

    def restart(self) -> asyncio.Task:
        return self._spawn(self.initialize())

    async def shutdown(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def initialize(self) -> None:
        self.generation += 1
        generation = self.generation

        self.deck = Deck()
        self.failed = False
        self.commit_phase = Commit_Phase.IDLE
        self.displayed_cursor = -1
        self.gestures.reset()
        self.preloader.clear()
        self.surface.reset()
        self._set_phase(Session_Phase.LOADING)
        self.surface.show_message(LOADING_MESSAGE)

        items = await self.image_source.fetch_batch(self.settings["batch_size"])
        if generation != self.generation:
            logger.debug("Dropping batch from stale session %d", generation)
            return

        if not items:
            self.failed = True
            self.surface.show_message(FAILED_MESSAGE)
            return

        logger.info("Session %d started with %d cats", generation, len(items))
        self.deck = create_deck(items)
        self.preloader.warm(self.deck.items)
        self._set_phase(Session_Phase.PRESENTING)
        await self.display_current(generation)

    async def display_current(self, generation: int) -> None:
        """Show the card under the cursor, skipping any that fail to load."""
        while not is_finished(self.deck):
            url = current_item(self.deck)
            self.surface.set_busy(True)
            loaded = await self.surface.load_image(url)
            if generation != self.generation:
                return
            self.surface.set_busy(False)

            if loaded:
                self.surface.set_image(url)
                self.displayed_cursor = self.deck.cursor
                self.surface.show_message(progress_text(self.deck))
                return

            logger.warning("Could not load %s, skipping", url)
            self.surface.show_message(SKIP_MESSAGE)
            skip_current(self.deck)

        self.to_summary()

    def to_summary(self) -> tuple[int, int]:
        liked_count = len(self.deck.accepted)
        total = len(self.deck.items)
        self.displayed_cursor = -1
        self._set_phase(Session_Phase.SUMMARY)
        self.surface.show_summary(list(self.deck.accepted), total)
        logger.info("Session %d done: liked %d of %d", self.generation, liked_count, total)
        return liked_count, total

    # --- Decisions ---

    def accepts_input(self) -> bool:
        return (self.phase == Session_Phase.PRESENTING
                and self.commit_phase == Commit_Phase.IDLE
                and self.displayed_cursor == self.deck.cursor)

    async def decide(self, liked: bool) -> bool:
        """Record a decision for the displayed card and show the next one."""
        if not self.accepts_input() or is_finished(self.deck):
            return False

        record_decision(self.deck, liked)
        self.displayed_cursor = -1
        self.surface.set_affordance(Affordance.NONE)
        self.surface.apply_transform(0, 0)
        await self.display_current(self.generation)
        return True

    def request_decide(self, liked: bool) -> asyncio.Task | None:
        """Fly the card off-screen, then commit. Ignored while a commit is already running."""
        if not self.accepts_input():
            return None

        self.commit_phase = Commit_Phase.ANIMATING
        self.gestures.reset()

        direction = 1 if liked else -1
        self.surface.set_affordance(Affordance.LIKE if liked else Affordance.DISLIKE)
        self.surface.apply_transform(
            self.settings["window_width"] * direction,
            self.settings["commit_rotation"] * direction,
            animated=True,
        )
        return self._spawn(self._commit_after_animation(liked, self.generation))

    async def _commit_after_animation(self, liked: bool, generation: int) -> None:
        await asyncio.sleep(self.settings["animation_ms"] / 1000)
        if generation != self.generation:
            return
        self.surface.apply_transform(0, 0)
        self.commit_phase = Commit_Phase.IDLE
        await self.decide(liked)

    def like(self) -> asyncio.Task | None:
        return self.request_decide(True)

    def dislike(self) -> asyncio.Task | None:
        return self.request_decide(False)

    # --- Pointer input ---

    def pointer_start(self, event: Pointer_Event) -> None:
        if self.accepts_input():
            self.gestures.start(event)

    def pointer_move(self, event: Pointer_Event) -> bool:
        return self.gestures.move(event)

    def pointer_end(self, event: Pointer_Event | None = None) -> Affordance:
        return self.gestures.end(event)

    def pointer_leave(self) -> None:
        self.gestures.leave()
