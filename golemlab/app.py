"""Program entry: start the window and drive the menus or the editor."""

from __future__ import annotations

import sys

from .editor import open_editor
from .gamestructs import CONFIG_PATH, Config, MenuType, load_config
from .graphics import Display
from .mainmenu import open_main_menu
from .newgame import DEFAULT_MAP_PATH, open_new_game_menu
from .scoreboard import SCORES_PATH
from .scoreview import open_scoreboard
from .settings import open_settings

WINDOW_TITLE = "Temple Golem"
BANNER = "Starting 'temple Golem' v0.4.35 [alpha] (wip)\n"


def next_menu(menu: MenuType, display: Display, config: Config) -> MenuType:
    """Open the given panel and return the one the player moves on to."""
    if menu is MenuType.MAIN_MENU:
        return open_main_menu(display, config)
    if menu is MenuType.SCOREBOARD:
        return open_scoreboard(display, config, SCORES_PATH)
    if menu is MenuType.SETTINGS:
        return open_settings(display, config, CONFIG_PATH)
    if menu is MenuType.NEW_GAME:
        return open_new_game_menu(display, config, DEFAULT_MAP_PATH, SCORES_PATH)
    return MenuType.EXIT


def menu_core(display: Display, config: Config) -> None:
    """Move between panels, starting at the main menu, until the player exits."""
    menu = open_main_menu(display, config)
    while menu is not MenuType.EXIT:
        menu = next_menu(menu, display, config)


def main(argv: list[str] | None = None) -> int:
    """Run the game, or with ``-e PATH`` the map editor."""
    args = sys.argv[1:] if argv is None else argv
    print(BANNER)

    edit_path: str | None = None
    if args:
        if args[0] != "-e":
            print("Incorrect program arguments.", file=sys.stderr)
            return 1
        if len(args) < 2:
            print("No file specified to edit in the editor.", file=sys.stderr)
            return 1
        edit_path = args[1]

    try:
        config = load_config()
    except (OSError, ValueError) as err:
        print(f"Could not load the configuration: {err}", file=sys.stderr)
        config = Config()

    try:
        display = Display(WINDOW_TITLE, config)
    except RuntimeError as err:
        print(f"Initialization was unsuccessful: {err}", file=sys.stderr)
        return 1

    try:
        if edit_path is None:
            menu_core(display, config)
        else:
            open_editor(edit_path, display, config)
    finally:
        display.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())