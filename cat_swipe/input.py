from __future__ import annotations
from dataclasses import dataclass

from pyray import *

from cat_swipe.models import Pointer_Event, Pointer_Kind, Session_Phase
from cat_swipe.rendering import Raylib_Surface, point_in_rect
from cat_swipe.session import Session_Controller


@dataclass
class Input_State:
    touching: bool = False  # touch point 0 was down last frame


def point_in_card(px: float, py: float, surface: Raylib_Surface) -> bool:
    x, y, w, h = surface.card_rect()
    return point_in_rect(px, py, x, y, w, h)


def handle_mouse(controller: Session_Controller, surface: Raylib_Surface) -> None:
    """Mouse drag on the card."""
    mx = get_mouse_x()
    my = get_mouse_y()
    drag = controller.drag

    if is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT):
        if point_in_card(mx, my, surface):
            controller.pointer_start(Pointer_Event(Pointer_Kind.MOUSE, mx))
    elif is_mouse_button_released(MouseButton.MOUSE_BUTTON_LEFT):
        controller.pointer_end(Pointer_Event(Pointer_Kind.MOUSE, mx))
    elif drag.active and drag.kind == Pointer_Kind.MOUSE:
        # if mouse leaves window mid-drag, just stop
        if not is_cursor_on_screen():
            controller.pointer_leave()
        else:
            controller.pointer_move(Pointer_Event(Pointer_Kind.MOUSE, mx))


def handle_touch(state: Input_State, controller: Session_Controller, surface: Raylib_Surface) -> None:
    """Touch drag on the card. Mouse clicks also report a touch point, so skip those."""
    if is_mouse_button_down(MouseButton.MOUSE_BUTTON_LEFT) or is_mouse_button_released(MouseButton.MOUSE_BUTTON_LEFT):
        state.touching = False
        return

    touching = get_touch_point_count() > 0
    if touching:
        position = get_touch_position(0)
        event = Pointer_Event(Pointer_Kind.TOUCH, position.x)
        if not state.touching:
            if point_in_card(position.x, position.y, surface):
                controller.pointer_start(event)
        else:
            controller.pointer_move(event)
    elif state.touching:
        controller.pointer_end()
    state.touching = touching


def handle_buttons(controller: Session_Controller, surface: Raylib_Surface) -> None:
    mx, my = get_mouse_x(), get_mouse_y()
    click = is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT)

    if controller.phase == Session_Phase.PRESENTING:
        if surface.like_button.pressed(mx, my, click):
            controller.like()
        elif surface.dislike_button.pressed(mx, my, click):
            controller.dislike()

    if controller.phase == Session_Phase.SUMMARY or controller.failed:
        if surface.restart_button.pressed(mx, my, click):
            controller.restart()


def handle_keys(controller: Session_Controller) -> None:
    if controller.phase == Session_Phase.PRESENTING:
        if is_key_pressed(KeyboardKey.KEY_RIGHT):
            controller.like()
        elif is_key_pressed(KeyboardKey.KEY_LEFT):
            controller.dislike()

    # R to restart with a new batch
    if is_key_pressed(KeyboardKey.KEY_R):
        controller.restart()


def update_input(state: Input_State, controller: Session_Controller, surface: Raylib_Surface) -> None:
    """Main input processing - call each frame."""
    handle_mouse(controller, surface)
    handle_touch(state, controller, surface)
    handle_buttons(controller, surface)
    handle_keys(controller)
