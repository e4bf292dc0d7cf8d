#!/usr/bin/env python3
"""
Planets Simulator entry point: the frame loop that drives the simulation core.

What this module does
- Opens a small, blank Pygame window to receive keyboard input; no scene is drawn.
- Translates key presses into control events for SimulationController.
- Calls advance() once per frame (capped at TARGET_FPS by pygame.time.Clock) and
  shows the controller status in the window title.

Keys
- Space: start/stop       =/+: faster          -: slower
- R: reverse              . : jump forward     , : jump back (while stopped)
- 1..8: select speed      F1..F12: load preset Esc: quit

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python planets_sim.py`
"""

import logging
from typing import Dict, Optional

import pygame

from planets.config import Config
from planets.constants import BACKGROUND_COLOR, TARGET_FPS, WINDOW_HEIGHT, WINDOW_WIDTH
from planets.controls import ControlEvent, Event, LoadPreset, SetSpeed
from planets.simulation import SimulationController

logger = logging.getLogger("planets_sim")

KEY_BINDINGS: Dict[int, ControlEvent] = {
    pygame.K_SPACE: ControlEvent.START_STOP,
    pygame.K_EQUALS: ControlEvent.FASTER,
    pygame.K_PLUS: ControlEvent.FASTER,
    pygame.K_KP_PLUS: ControlEvent.FASTER,
    pygame.K_MINUS: ControlEvent.SLOWER,
    pygame.K_KP_MINUS: ControlEvent.SLOWER,
    pygame.K_r: ControlEvent.REVERSE,
    pygame.K_PERIOD: ControlEvent.JUMP_FORWARD,
    pygame.K_COMMA: ControlEvent.JUMP_BACK,
}

SPEED_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4,
              pygame.K_5, pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9)
PRESET_KEYS = (pygame.K_F1, pygame.K_F2, pygame.K_F3, pygame.K_F4,
               pygame.K_F5, pygame.K_F6, pygame.K_F7, pygame.K_F8,
               pygame.K_F9, pygame.K_F10, pygame.K_F11, pygame.K_F12)


def event_for_key(key: int, speed_count: int, preset_count: int) -> Optional[Event]:
    """Map a pygame key code to a control event, or None if the key is unbound."""
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    if key in SPEED_KEYS:
        index = SPEED_KEYS.index(key)
        return SetSpeed(index) if index < speed_count else None
    if key in PRESET_KEYS:
        index = PRESET_KEYS.index(key)
        return LoadPreset(index) if index < preset_count else None
    return None


def log_help(sim: SimulationController) -> None:
    for key, ev in KEY_BINDINGS.items():
        logger.info("%-8s %s", pygame.key.name(key), ev.description)
    if sim.preset is not None:
        for i, preset in enumerate(sim.preset.choice_set):
            if i < len(PRESET_KEYS):
                logger.info("%-8s Load preset: %s", pygame.key.name(PRESET_KEYS[i]), preset.name)


def run(sim: SimulationController) -> None:
    pygame.init()
    log_help(sim)
    surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()
    speed_count = len(sim.speed.choice_set)
    preset_count = len(sim.preset.choice_set) if sim.preset is not None else 0
    last_caption = None

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                control = event_for_key(event.key, speed_count, preset_count)
                if control is not None:
                    sim.handle_event(control)

        sim.advance()

        caption = sim.status().describe()
        if caption != last_caption:
            pygame.display.set_caption(caption)
            last_caption = caption

        surface.fill(BACKGROUND_COLOR)
        pygame.display.flip()

        # Limit FPS
        clock.tick(TARGET_FPS)

    pygame.quit()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sim = SimulationController.from_config(Config.default())
    try:
        run(sim)
    finally:
        logger.info("Stopped at %s", sim.status().describe())


if __name__ == "__main__":
    main()
