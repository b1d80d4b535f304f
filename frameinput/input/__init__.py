"""Polled input state runtime modules."""

from frameinput.input.button_table import ButtonTable
from frameinput.input.input_frame import InputDevice, InputFrame
from frameinput.input.key_state import KeyState
from frameinput.input.pointer_state import PointerState

__all__ = ["ButtonTable", "InputDevice", "InputFrame", "KeyState", "PointerState"]
