from __future__ import annotations
import asyncio
import logging
from typing import Annotated

import httpx
import typer
from pyray import *

from cat_swipe.config import tweak, validate_tweak
from cat_swipe.image_source import Image_Source
from cat_swipe.input import Input_State, update_input
from cat_swipe.preloader import Preloader
from cat_swipe.rendering import Raylib_Surface, draw_background
from cat_swipe.session import Session_Controller

app = typer.Typer()


async def run(settings: dict) -> None:
    set_config_flags(ConfigFlags.FLAG_WINDOW_HIGHDPI)
    init_window(settings["window_width"], settings["window_height"], settings["window_title"])
    set_target_fps(settings["target_fps"])

    async with httpx.AsyncClient(timeout=settings["http_timeout"], follow_redirects=True) as client:
        preloader = Preloader(client)
        surface = Raylib_Surface(preloader, settings)
        controller = Session_Controller(Image_Source(client, settings), preloader, surface, settings)
        controller.start()

        input_state = Input_State()
        while not window_should_close():
            update_input(input_state, controller, surface)

            begin_drawing()
            draw_background()
            surface.draw(failed=controller.failed)
            end_drawing()

            # Let fetches and timers run between frames
            await asyncio.sleep(0)

        await controller.shutdown()
        preloader.clear()
        surface.reset()

    close_window()


@app.command()
def play(
    batch_size: Annotated[int, typer.Option("-n", "--batch-size", help="How many cats to fetch (10-20)")] = tweak["batch_size"],
    like_threshold: Annotated[int, typer.Option(help="Drag distance in px before the badge shows")] = tweak["like_threshold"],
    commit_threshold: Annotated[int, typer.Option(help="Drag distance in px needed to commit on release")] = tweak["commit_threshold"],
    rotation_divisor: Annotated[float, typer.Option(help="Card rotation in degrees is drag distance / divisor")] = tweak["rotation_divisor"],
    animation_ms: Annotated[int, typer.Option(help="Length of the fly-off animation")] = tweak["animation_ms"],
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Debug logging")] = False,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = {
        **tweak,
        "batch_size": batch_size,
        "like_threshold": like_threshold,
        "commit_threshold": commit_threshold,
        "rotation_divisor": rotation_divisor,
        "animation_ms": animation_ms,
    }
    try:
        validate_tweak(settings)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    asyncio.run(run(settings))


if __name__ == "__main__":
    app()
