"""
Interactive console menu.

Reads a numeric choice (and a camera number when more than one camera is
attached) and dispatches to the capture sessions or the info reporter.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from camera.base import Camera
from camera.info import report
from capture.photo import take_hidden_photo, take_photo
from capture.recorder import record_video
from ops.console import hide_console_window, show_console_window
from runtime.context import RuntimeContext

Handler = Callable[[Camera], object]

CHOICE_EXIT = 0
CHOICE_RECORD = 1
CHOICE_PHOTO = 2
CHOICE_HIDDEN_PHOTO = 3
CHOICE_INFO = 4

MENU_TEXT = (
    "\nSelect operation mode:\n"
    "1. Record Video\n"
    "2. Take Photo\n"
    "3. Hidden Photo\n"
    "4. Camera Information\n"
    "0. Exit"
)


class MenuState(str, Enum):
    AWAITING_CHOICE = "awaiting_choice"
    DISPATCHING = "dispatching"
    EXIT = "exit"


class MenuController:
    """
    Menu loop over the cameras held by a RuntimeContext.

    States: AWAITING_CHOICE -> DISPATCHING -> AWAITING_CHOICE, until a 0
    choice (or end of input) moves to EXIT. Bad input never leaves the loop.
    """

    def __init__(
        self,
        ctx: RuntimeContext,
        handlers: Optional[Dict[int, Handler]] = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self.ctx = ctx
        self.handlers = handlers if handlers is not None else self._default_handlers()
        self._input = input_fn
        self.state = MenuState.AWAITING_CHOICE
        self._selection: Optional[Tuple[int, int]] = None

    def _default_handlers(self) -> Dict[int, Handler]:
        cfg = self.ctx.config
        namer = self.ctx.namer
        return {
            CHOICE_RECORD: lambda cam: record_video(cam, cfg.record, namer),
            CHOICE_PHOTO: lambda cam: take_photo(cam, cfg.photo, namer),
            CHOICE_HIDDEN_PHOTO: self._hidden_photo,
            CHOICE_INFO: report,
        }

    def _hidden_photo(self, camera: Camera) -> Optional[str]:
        cfg = self.ctx.config.photo
        hidden = cfg.hide_console and hide_console_window()
        try:
            return take_hidden_photo(camera, cfg, self.ctx.namer)
        finally:
            if hidden:
                show_console_window()

    def _read_number(self, prompt: str) -> Optional[int]:
        """
        Read an integer from input.

        Returns None on end of input. Raises ValueError on non-numeric text.
        """
        try:
            text = self._input(prompt)
        except EOFError:
            return None
        return int(text.strip())

    def run(self) -> None:
        self.state = MenuState.AWAITING_CHOICE
        while self.state != MenuState.EXIT:
            self.state = self.step()
        logging.info("Menu exited")

    def step(self) -> MenuState:
        """Perform one state transition and return the next state."""
        if self.state == MenuState.DISPATCHING:
            return self._dispatch()
        if self.state == MenuState.EXIT:
            return MenuState.EXIT
        return self._await_choice()

    def _await_choice(self) -> MenuState:
        print(MENU_TEXT)
        try:
            choice = self._read_number("Your choice: ")
        except ValueError:
            print("Invalid input")
            return MenuState.AWAITING_CHOICE
        if choice is None or choice == CHOICE_EXIT:
            return MenuState.EXIT

        number = 1
        count = self.ctx.camera_count
        if count > 1:
            try:
                selected = self._read_number(f"Select camera (1 - {count}): ")
            except ValueError:
                print("Invalid input")
                return MenuState.AWAITING_CHOICE
            if selected is None:
                return MenuState.EXIT
            if not 1 <= selected <= count:
                print("Invalid index")
                return MenuState.AWAITING_CHOICE
            number = selected

        self._selection = (choice, number)
        return MenuState.DISPATCHING

    def _dispatch(self) -> MenuState:
        choice, number = self._selection
        self._selection = None
        handler = self.handlers.get(choice)
        if handler is None:
            print("Invalid choice!")
            return MenuState.AWAITING_CHOICE

        logging.info(f"Dispatching choice {choice} on camera {number}")
        handler(self.ctx.camera_at(number))
        return MenuState.AWAITING_CHOICE
