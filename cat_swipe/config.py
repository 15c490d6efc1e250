tweak = {
    # Window settings
    "window_width": 900,
    "window_height": 1000,
    "window_title": "Cat Swipe",
    "target_fps": 60,
    "background_color": (40, 44, 52, 255),

    # Card dimensions
    "card_width": 500,
    "card_height": 600,
    "card_corner_radius": 18,
    "card_y": 150,

    # Card colors
    "card_background": (255, 255, 255, 255),
    "card_border": (80, 80, 80, 255),
    "like_color": (80, 200, 120, 255),
    "dislike_color": (230, 90, 90, 255),
    "text_color": (230, 230, 230, 255),
    "busy_overlay": (0, 0, 0, 150),

    # Font settings
    "progress_font_size": 24,
    "badge_font_size": 48,
    "title_font_size": 40,

    # Session
    "batch_size": 12,  # Must stay within 10..20

    # Swipe settings
    "like_threshold": 20,     # px before the like/dislike badge shows
    "commit_threshold": 80,   # px needed at release to commit
    "rotation_divisor": 15,   # rotation in degrees = delta / divisor
    "scroll_epsilon": 10,     # px before a touch drag stops scrolling
    "commit_rotation": 20,    # degrees when flying off-screen
    "animation_ms": 250,
    "snap_speed": 0.25,       # fraction of the remaining distance per frame

    # Buttons
    "button_width": 160,
    "button_height": 50,
    "button_gap": 40,
    "button_color": (70, 130, 180, 255),
    "button_hover_color": (90, 150, 200, 255),
    "button_text_color": (255, 255, 255, 255),

    # Summary gallery
    "thumb_width": 150,
    "thumb_height": 180,
    "thumb_gap": 12,

    # Image provider
    "api_url": "https://cataas.com/cat?json=true",
    "base_url": "https://cataas.com",
    "image_width": 500,
    "image_height": 600,
    "http_timeout": 10.0,
}

BATCH_SIZE_RANGE = (10, 20)


def validate_tweak(settings: dict) -> None:
    """Raise ValueError if the settings can't drive a session."""
    low, high = BATCH_SIZE_RANGE
    batch_size = settings["batch_size"]
    if not low <= batch_size <= high:
        raise ValueError(f"batch_size must be between {low} and {high}, got {batch_size}")
    if settings["like_threshold"] <= 0 or settings["commit_threshold"] <= 0:
        raise ValueError("thresholds must be positive")
    if settings["like_threshold"] >= settings["commit_threshold"]:
        raise ValueError("like_threshold must be smaller than commit_threshold")
    if settings["rotation_divisor"] == 0:
        raise ValueError("rotation_divisor can't be zero")
    if settings["animation_ms"] < 0:
        raise ValueError("animation_ms can't be negative")
