from __future__ import annotations
from cat_swipe.models import Deck


def create_deck(items: list[str]) -> Deck:
    return Deck(items=list(items))


def current_item(deck: Deck) -> str | None:
    if is_finished(deck):
        return None
    return deck.items[deck.cursor]


def is_finished(deck: Deck) -> bool:
    return deck.cursor >= len(deck.items)


def record_decision(deck: Deck, liked: bool) -> str:
    """Record a like/dislike for the current card and move to the next one."""
    if is_finished(deck):
        raise IndexError("No card left to decide on")
    url = deck.items[deck.cursor]
    if liked:
        deck.accepted.append(url)
    deck.cursor += 1
    return url


def skip_current(deck: Deck) -> None:
    """Move past a card that couldn't be shown."""
    if not is_finished(deck):
        deck.cursor += 1


def progress_text(deck: Deck) -> str:
    total = len(deck.items)
    if deck.cursor < total:
        return f"Cat {deck.cursor + 1} of {total}"
    return "All cats viewed"
