#!/usr/bin/env python3
"""
Control events understood by SimulationController.handle_event().

Events are semantic, not tied to an input device: the frame loop (or any UI)
translates raw input into these values. Parameterless commands are members of
ControlEvent; commands that pick an option carry the option's index.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ControlEvent(Enum):
    START_STOP = "Start/stop simulation"
    FASTER = "Increase the simulation speed"
    SLOWER = "Decrease the simulation speed"
    REVERSE = "Toggle reverse time"
    JUMP_FORWARD = "Jump forward by one speed unit (stopped only)"
    JUMP_BACK = "Jump back by one speed unit (stopped only)"

    @property
    def description(self) -> str:
        return self.value


@dataclass(frozen=True)
class SetSpeed:
    """Select the speed preset at index."""
    index: int


@dataclass(frozen=True)
class LoadPreset:
    """Replace the current state with the preset snapshot at index."""
    index: int


Event = Union[ControlEvent, SetSpeed, LoadPreset]
