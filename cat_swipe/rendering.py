from __future__ import annotations
import logging
from dataclasses import dataclass

from pyray import *
from raylib import ffi

from cat_swipe.config import tweak
from cat_swipe.models import Affordance, Card_View, Session_Phase
from cat_swipe.preloader import Preloader
from cat_swipe.surface import Surface

logger = logging.getLogger(__name__)


def color_from_tuple(c: tuple) -> Color:
    """Convert RGBA tuple to raylib Color."""
    return Color(c[0], c[1], c[2], c[3])


def point_in_rect(mx: float, my: float, x: float, y: float, w: float, h: float) -> bool:
    return x <= mx <= x + w and y <= my <= y + h


@dataclass
class Button:
    x: int
    y: int
    width: int
    height: int
    text: str = ""

    def pressed(self, mx, my, click) -> bool:
        if not click:
            return False
        return point_in_rect(mx, my, self.x, self.y, self.width, self.height)


def image_file_type(data: bytes) -> str:
    if data.startswith(b"\x89PNG"):
        return ".png"
    if data.startswith(b"GIF8"):
        return ".gif"
    return ".jpg"


def load_rounded_texture(data: bytes) -> Texture2D | None:
    """Decode downloaded bytes into a texture with rounded corners."""
    buffer = ffi.from_buffer("unsigned char[]", data)
    image = load_image_from_memory(image_file_type(data), buffer, len(data))
    if image.width == 0 or image.height == 0:
        return None

    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]
    iw = image.width
    ih = image.height

    # Scale corner radius to match image resolution
    sr = int(r * min(iw / w, ih / h))

    mask = gen_image_color(iw, ih, Color(0, 0, 0, 0))
    image_draw_rectangle(mask, sr, 0, iw - 2 * sr, ih, WHITE)
    image_draw_rectangle(mask, 0, sr, iw, ih - 2 * sr, WHITE)
    image_draw_circle(mask, sr, sr, sr, WHITE)
    image_draw_circle(mask, iw - sr, sr, sr, WHITE)
    image_draw_circle(mask, sr, ih - sr, sr, WHITE)
    image_draw_circle(mask, iw - sr, ih - sr, sr, WHITE)

    image_alpha_mask(image, mask)
    texture = load_texture_from_image(image)

    unload_image(image)
    unload_image(mask)
    return texture


def animate(view: Card_View, dt: float) -> None:
    """Move the rendered card towards its target transform."""
    if not view.animated:
        view.x = view.target_x
        view.rotation = view.target_rotation
        return
    view.x = view.x * (1 - dt) + view.target_x * dt
    view.rotation = view.rotation * (1 - dt) + view.target_rotation * dt


def draw_text_centered(text: str, y: int, size: int, color: tuple) -> None:
    width = measure_text(text, size)
    draw_text(text, (tweak["window_width"] - width) // 2, y, size, color_from_tuple(color))


def draw_button(button: Button, glow_color: tuple | None = None) -> None:
    mx, my = get_mouse_x(), get_mouse_y()
    hovered = point_in_rect(mx, my, button.x, button.y, button.width, button.height)
    if glow_color is not None:
        color = color_from_tuple(glow_color)
    else:
        color = color_from_tuple(tweak["button_hover_color" if hovered else "button_color"])
    draw_rectangle_rounded(
        Rectangle(button.x, button.y, button.width, button.height), 0.3, 8, color
    )
    text_width = measure_text(button.text, 20)
    text_x = button.x + (button.width - text_width) // 2
    text_y = button.y + (button.height - 20) // 2
    draw_text(button.text, text_x, text_y, 20, color_from_tuple(tweak["button_text_color"]))


def draw_background() -> None:
    clear_background(color_from_tuple(tweak["background_color"]))


class Raylib_Surface(Surface):
    def __init__(self, preloader: Preloader, settings: dict = tweak):
        self.preloader = preloader
        self.settings = settings
        self.view = Card_View()
        self.phase = Session_Phase.LOADING
        self.message = ""
        self.busy = False
        self.affordance = Affordance.NONE
        self.current_url: str | None = None
        self.textures: dict[str, Texture2D] = {}
        self.summary: list[str] = []
        self.total = 0

        W = settings["window_width"]
        H = settings["window_height"]
        bw = settings["button_width"]
        bh = settings["button_height"]
        gap = settings["button_gap"]
        button_y = settings["card_y"] + settings["card_height"] + 60
        left_x = W // 2 - gap // 2 - bw
        self.dislike_button = Button(left_x, button_y, bw, bh, text="Dislike")
        self.like_button = Button(W // 2 + gap // 2, button_y, bw, bh, text="Like")
        self.restart_button = Button((W - bw) // 2, H - bh - 30, bw, bh, text="Restart")

    def card_rect(self) -> tuple[float, float, float, float]:
        """Resting position of the card, ignoring the drag transform."""
        w = self.settings["card_width"]
        h = self.settings["card_height"]
        return (self.settings["window_width"] - w) / 2, self.settings["card_y"], w, h

    # --- Surface contract ---

    def reset(self) -> None:
        for texture in self.textures.values():
            unload_texture(texture)
        self.textures.clear()
        self.current_url = None
        self.summary = []
        self.total = 0
        self.busy = False
        self.affordance = Affordance.NONE
        self.view = Card_View()

    def show_view(self, phase: Session_Phase) -> None:
        self.phase = phase

    def show_message(self, text: str) -> None:
        self.message = text

    def set_busy(self, busy: bool) -> None:
        self.busy = busy

    async def load_image(self, url: str) -> bool:
        if url in self.textures:
            return True
        data = await self.preloader.load(url)
        if not data:
            return False
        texture = load_rounded_texture(data)
        if texture is None:
            logger.warning("Could not decode image from %s", url)
            return False
        self.textures[url] = texture
        return True

    def set_image(self, url: str) -> None:
        self.current_url = url

    def apply_transform(self, translate_x: float, rotate_deg: float, animated: bool = False) -> None:
        self.view.target_x = translate_x
        self.view.target_rotation = rotate_deg
        self.view.animated = animated

    def set_affordance(self, affordance: Affordance) -> None:
        self.affordance = affordance

    def show_summary(self, accepted: list[str], total: int) -> None:
        self.summary = accepted
        self.total = total

    # --- Drawing ---

    def draw(self, failed: bool = False) -> None:
        animate(self.view, self.settings["snap_speed"])
        if self.phase == Session_Phase.SUMMARY:
            self.draw_summary()
            return

        draw_text_centered(self.message, 60, self.settings["progress_font_size"], self.settings["text_color"])
        if self.phase == Session_Phase.PRESENTING:
            self.draw_card()
            self.draw_decision_buttons()
        if failed:
            draw_button(self.restart_button)

    def draw_card(self) -> None:
        x, y, w, h = self.card_rect()
        r = self.settings["card_corner_radius"]

        rl_push_matrix()
        rl_translatef(x + w / 2 + self.view.x, y + h / 2, 0)
        rl_rotatef(self.view.rotation, 0, 0, 1)
        rl_translatef(-w / 2, -h / 2, 0)

        texture = self.textures.get(self.current_url)
        if texture is not None:
            source_rect = Rectangle(0, 0, texture.width, texture.height)
            draw_texture_pro(texture, source_rect, Rectangle(0, 0, w, h), Vector2(0, 0), 0, WHITE)
        else:
            draw_rectangle_rounded(
                Rectangle(0, 0, w, h), r / min(w, h), 8,
                color_from_tuple(self.settings["card_background"])
            )
        draw_rectangle_rounded_lines_ex(
            Rectangle(0, 0, w, h), r / min(w, h), 8, 2,
            color_from_tuple(self.settings["card_border"])
        )

        if self.affordance == Affordance.LIKE:
            self.draw_badge("LIKE", 30, self.settings["like_color"])
        elif self.affordance == Affordance.DISLIKE:
            badge_width = measure_text("NOPE", self.settings["badge_font_size"])
            self.draw_badge("NOPE", w - badge_width - 30, self.settings["dislike_color"])

        if self.busy:
            draw_rectangle_rounded(
                Rectangle(0, 0, w, h), r / min(w, h), 8,
                color_from_tuple(self.settings["busy_overlay"])
            )
            text_width = measure_text("Loading...", 30)
            draw_text("Loading...", int((w - text_width) / 2), int(h / 2 - 15), 30, WHITE)

        rl_pop_matrix()

    def draw_badge(self, text: str, x: float, color: tuple) -> None:
        size = self.settings["badge_font_size"]
        width = measure_text(text, size)
        draw_rectangle_lines_ex(Rectangle(x - 8, 22, width + 16, size + 16), 4, color_from_tuple(color))
        draw_text(text, int(x), 30, size, color_from_tuple(color))

    def draw_decision_buttons(self) -> None:
        like_glow = self.settings["like_color"] if self.affordance == Affordance.LIKE else None
        dislike_glow = self.settings["dislike_color"] if self.affordance == Affordance.DISLIKE else None
        draw_button(self.dislike_button, dislike_glow)
        draw_button(self.like_button, like_glow)

    def draw_summary(self) -> None:
        W = self.settings["window_width"]
        tw = self.settings["thumb_width"]
        th = self.settings["thumb_height"]
        gap = self.settings["thumb_gap"]
        title_size = self.settings["title_font_size"]

        draw_text_centered(
            f"You liked {len(self.summary)} of {self.total} cats",
            40, title_size, self.settings["text_color"]
        )

        if not self.summary:
            draw_text_centered("No likes this time", 400, 30, self.settings["text_color"])
        else:
            columns = max(1, (W - gap) // (tw + gap))
            start_x = (W - columns * (tw + gap) + gap) // 2
            start_y = 40 + title_size + 40
            for i, url in enumerate(self.summary):
                texture = self.textures.get(url)
                if texture is None:
                    continue
                x = start_x + (i % columns) * (tw + gap)
                y = start_y + (i // columns) * (th + gap)
                source_rect = Rectangle(0, 0, texture.width, texture.height)
                draw_texture_pro(texture, source_rect, Rectangle(x, y, tw, th), Vector2(0, 0), 0, WHITE)

        draw_button(self.restart_button)
