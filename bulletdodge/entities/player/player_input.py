"""
player_input.py
---------------
Per-frame snapshot of the player's directional input.

The player never polls the keyboard itself; the host builds an InputFlags
each frame and passes it to PlayerController.update().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputFlags:
    """Four boolean directional flags sampled once per frame."""
    forward: bool = False
    backward: bool = False
    turn_left: bool = False
    turn_right: bool = False

    @property
    def radial(self) -> int:
        """+1 thrusting forward, -1 backward, 0 when both or neither."""
        return int(self.forward) - int(self.backward)

    @property
    def angular(self) -> int:
        """+1 turning right, -1 turning left, 0 when both or neither."""
        return int(self.turn_right) - int(self.turn_left)

    @property
    def idle(self) -> bool:
        return not (self.forward or self.backward or self.turn_left or self.turn_right)


NO_INPUT = InputFlags()
