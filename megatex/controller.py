"""Game controller state: buttons, analog stick and edge detection."""

from dataclasses import dataclass
from enum import IntFlag
from typing import Sequence

MAX_PLAYERS = 4
DEAD_FRAMES_AFTER_CLEAR = 30
STICK_THRESHOLD = 40
_BUTTON_MASK = 0xFFFF


class ControllerDirection(IntFlag):
    NONE = 0
    UP = 1 << 0
    RIGHT = 1 << 1
    DOWN = 1 << 2
    LEFT = 1 << 3


class Button(IntFlag):
    R_CBUTTONS = 0x0001
    L_CBUTTONS = 0x0002
    D_CBUTTONS = 0x0004
    U_CBUTTONS = 0x0008
    R_TRIG = 0x0010
    L_TRIG = 0x0020
    R_JPAD = 0x0100
    L_JPAD = 0x0200
    D_JPAD = 0x0400
    U_JPAD = 0x0800
    START_BUTTON = 0x1000
    Z_TRIG = 0x2000
    B_BUTTON = 0x4000
    A_BUTTON = 0x8000


@dataclass(frozen=True)
class ControllerPad:
    """One reading of a controller: pressed buttons and stick position."""

    button: int = 0
    stick_x: int = 0
    stick_y: int = 0


_EMPTY_PAD = ControllerPad()


class Controllers:
    """State of every controller port, with the previous frame kept for edges."""

    def __init__(self, player_count=MAX_PLAYERS):
        if player_count <= 0:
            raise ValueError("player_count must be positive")
        self.player_count = player_count
        self._connected = [True] * player_count
        self._pads = [_EMPTY_PAD] * player_count
        self._last_button = [0] * player_count
        self._last_direction = [ControllerDirection.NONE] * player_count
        self.dead_frames = 0

    def clear_state(self) -> None:
        """Forget all input and ignore the next readings for a while."""
        self._pads = [_EMPTY_PAD] * self.player_count
        self._last_button = [0] * self.player_count
        self._last_direction = [ControllerDirection.NONE] * self.player_count
        self.dead_frames = DEAD_FRAMES_AFTER_CLEAR

    def set_connected(self, index: int, connected: bool) -> None:
        self._connected[index] = bool(connected)

    def is_connected(self, index: int) -> bool:
        return self._connected[index]

    def read_pending_data(self, pads: Sequence[ControllerPad]) -> None:
        """Store a fresh reading; ports without a reading count as idle."""
        if len(pads) > self.player_count:
            raise ValueError(f"got {len(pads)} pads for {self.player_count} players")
        readings = list(pads) + [_EMPTY_PAD] * (self.player_count - len(pads))

        if self.dead_frames:
            self.dead_frames -= 1
            readings = [_EMPTY_PAD] * self.player_count

        self._pads = [
            pad if connected else _EMPTY_PAD
            for pad, connected in zip(readings, self._connected)
        ]

    def save_previous_state(self) -> None:
        """Remember this frame's input for the next frame's edge detection."""
        self._last_direction = [self.get_direction(i) for i in range(self.player_count)]
        self._last_button = [pad.button & _BUTTON_MASK for pad in self._pads]

    def pad(self, index: int) -> ControllerPad:
        return self._pads[index]

    def last_button(self, index: int) -> int:
        return self._last_button[index]

    def get_button(self, index: int, button: int) -> int:
        """Which of the given buttons are held."""
        return self._pads[index].button & button & _BUTTON_MASK

    def get_button_down(self, index: int, button: int) -> int:
        """Which of the given buttons were pressed this frame."""
        return self._pads[index].button & ~self._last_button[index] & button & _BUTTON_MASK

    def get_button_up(self, index: int, button: int) -> int:
        """Which of the given buttons were released this frame."""
        return ~self._pads[index].button & self._last_button[index] & button & _BUTTON_MASK

    def get_direction(self, index: int) -> ControllerDirection:
        """Direction held on the stick or the direction pad."""
        pad = self._pads[index]
        result = ControllerDirection.NONE
        if pad.stick_y > STICK_THRESHOLD or pad.button & Button.U_JPAD:
            result |= ControllerDirection.UP
        if pad.stick_y < -STICK_THRESHOLD or pad.button & Button.D_JPAD:
            result |= ControllerDirection.DOWN
        if pad.stick_x > STICK_THRESHOLD or pad.button & Button.R_JPAD:
            result |= ControllerDirection.RIGHT
        if pad.stick_x < -STICK_THRESHOLD or pad.button & Button.L_JPAD:
            result |= ControllerDirection.LEFT
        return result

    def get_direction_down(self, index: int) -> ControllerDirection:
        """Directions that started being held this frame."""
        return self.get_direction(index) & ~self._last_direction[index]