"""
Arcade window hosting the game

The window plays every outside role around the engine: it is the render
sink, the HUD and the producer of input (keys plus on-screen touch zones),
and it pumps the frame scheduler once per arcade update.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

import arcade

from .config import GameConfig
from .difficulty import DIFFICULTIES, cycle_difficulty
from .entities import PowerUpType, RunState
from .input import FIRE, LEFT, RIGHT, TOUCH_ZONE_HEIGHT, TOUCH_ZONES, InputTracker, zone_at
from .loop import FrameLoop, LoopState, QueueScheduler
from .simulation import Simulation

logger = logging.getLogger(__name__)

ARCADE_BINDINGS = {
    LEFT: (arcade.key.LEFT, arcade.key.A),
    RIGHT: (arcade.key.RIGHT, arcade.key.D),
    FIRE: (arcade.key.SPACE, arcade.key.Z),
}

DIFFICULTY_KEYS = {
    arcade.key.KEY_1: "easy",
    arcade.key.KEY_2: "medium",
    arcade.key.KEY_3: "hard",
}


class AsteroidsWindow(arcade.Window):
    """Arcade window for playing or watching the asteroid shooter"""

    def __init__(self, config: GameConfig, title: str = "Asteroid Rush", difficulty: str = "easy"):
        super().__init__(config.width, config.height, title)
        self.config = config
        self.difficulty = difficulty

        self.inputs = InputTracker(ARCADE_BINDINGS)
        self.scheduler = QueueScheduler()
        self.loop: Optional[FrameLoop] = None

        self.snapshot: Optional[RunState] = None
        self.score = 0
        self.final_score: Optional[int] = None
        self.best_score = 0
        self._mouse_zone: Optional[str] = None

        # Colors
        self.background_color = (18, 18, 22)
        self.SHIP_C = (123, 225, 255)
        self.SHIELD_C = (0, 255, 255)
        self.PROJECTILE_C = (0, 255, 255)
        self.OBSTACLE_C = (90, 90, 90)
        self.OBSTACLE_EDGE_C = (40, 40, 40)
        self.ZONE_C = (255, 255, 255, 40)
        self.HUD_C = (220, 220, 220)
        self.POWER_UP_C = {
            PowerUpType.SHIELD: (0, 255, 255),
            PowerUpType.FIRE_RATE: (255, 255, 0),
            PowerUpType.SCORE: (255, 0, 255),
        }

    def attach(self, loop: FrameLoop):
        self.loop = loop

    # ----------------------------
    # Render sink / HUD
    # ----------------------------

    def render(self, state: RunState):
        self.snapshot = state

    def score_changed(self, score: int):
        self.score = score

    def game_over(self, score: int):
        self.final_score = score
        self.best_score = max(self.best_score, score)
        logger.info("Game over, final score %d", score)

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        self.scheduler.run_pending()

    def on_key_press(self, symbol: int, modifiers: int):
        self.inputs.key_down(symbol)
        if self.loop is None:
            return

        if self.loop.state is LoopState.IDLE:
            self._home_key(symbol)
        elif symbol == arcade.key.R:
            self._start(restart=True)
        elif symbol == arcade.key.ESCAPE:
            self._go_home()

    def on_key_release(self, symbol: int, modifiers: int):
        self.inputs.key_up(symbol)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        zone = zone_at(x, y, self.width)
        if zone is not None:
            self._mouse_zone = zone
            self.inputs.press_zone(zone)

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if self._mouse_zone is not None:
            self.inputs.release_zone(self._mouse_zone)
            self._mouse_zone = None

    def on_deactivate(self):
        self.inputs.release_all()

    def on_draw(self):
        self.clear()
        if self.loop is not None and self.loop.state is LoopState.IDLE:
            self._draw_home()
            return
        if self.snapshot is not None:
            self._draw_run(self.snapshot)
        if self.loop is not None:
            self._draw_touch_zones()
        self._draw_hud()

    # ----------------------------
    # Screens
    # ----------------------------

    def _home_key(self, symbol: int):
        if symbol in DIFFICULTY_KEYS:
            self.difficulty = DIFFICULTY_KEYS[symbol]
        elif symbol in (arcade.key.LEFT, arcade.key.RIGHT):
            step = -1 if symbol == arcade.key.LEFT else 1
            self.difficulty = cycle_difficulty(self.difficulty, step)
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            self._start(restart=False)

    def _start(self, restart: bool):
        self.final_score = None
        self.score = 0
        if restart:
            self.loop.restart_run(self.difficulty)
        else:
            self.loop.start_run(self.difficulty)

    def _go_home(self):
        self.loop.reset()
        self.snapshot = None
        self.final_score = None

    # ----------------------------
    # Drawing (simulation y grows downwards, arcade y grows upwards)
    # ----------------------------

    def _sy(self, y: float) -> float:
        return self.height - y

    def _draw_run(self, state: RunState):
        # Power-ups
        for p in state.power_ups:
            arcade.draw_circle_filled(p.x, self._sy(p.y), p.size, self.POWER_UP_C[p.kind])

        # Obstacles
        for o in state.obstacles:
            c, s = math.cos(o.rotation), math.sin(o.rotation)
            points = [
                (o.x + px * c - py * s, self._sy(o.y + px * s + py * c))
                for px, py in o.points
            ]
            arcade.draw_polygon_filled(points, self.OBSTACLE_C)
            arcade.draw_polygon_outline(points, self.OBSTACLE_EDGE_C, 2)

        # Projectiles
        for p in state.projectiles:
            arcade.draw_lrbt_rectangle_filled(
                p.x - 2, p.x + 2, self._sy(p.y + 4), self._sy(p.y - 8), self.PROJECTILE_C
            )

        # Ship
        ship = state.ship
        color = self.SHIELD_C if state.shield_active else self.SHIP_C
        arcade.draw_triangle_filled(
            ship.x, self._sy(ship.y + ship.height),
            ship.x + ship.width / 2, self._sy(ship.y),
            ship.x + ship.width, self._sy(ship.y + ship.height),
            color,
        )

    def _draw_touch_zones(self):
        zone_w = self.width / len(TOUCH_ZONES)
        labels = {LEFT: "<", FIRE: "FIRE", RIGHT: ">"}
        for i, zone in enumerate(TOUCH_ZONES):
            left = i * zone_w + 2
            arcade.draw_lrbt_rectangle_filled(
                left, left + zone_w - 4, 2, TOUCH_ZONE_HEIGHT, self.ZONE_C
            )
            arcade.draw_text(
                labels[zone], left + zone_w / 2, 8, self.HUD_C, 12, anchor_x="center"
            )

    def _draw_hud(self):
        arcade.draw_text(f"Score: {self.score}", 12, self.height - 28, self.HUD_C, 16)
        arcade.draw_text(
            self.difficulty, self.width - 12, self.height - 28, self.HUD_C, 12, anchor_x="right"
        )
        if self.final_score is not None:
            cx, cy = self.width / 2, self.height / 2
            arcade.draw_text(
                f"You were hit! Final score: {self.final_score}",
                cx, cy + 12, self.HUD_C, 18, anchor_x="center",
            )
            arcade.draw_text(
                "R: restart   Esc: home", cx, cy - 20, self.HUD_C, 12, anchor_x="center"
            )

    def _draw_home(self):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text("ASTEROID RUSH", cx, cy + 80, self.HUD_C, 28, anchor_x="center")
        for i, name in enumerate(DIFFICULTIES):
            marker = "> " if name == self.difficulty else "  "
            arcade.draw_text(
                f"{marker}{i + 1}. {name}", cx, cy + 20 - i * 26, self.HUD_C, 16, anchor_x="center"
            )
        arcade.draw_text("Enter: start", cx, cy - 80, self.HUD_C, 12, anchor_x="center")
        if self.best_score:
            arcade.draw_text(
                f"Best this session: {self.best_score}", cx, cy - 110, self.HUD_C, 12, anchor_x="center"
            )


def play(config: Optional[GameConfig] = None, difficulty: str = "easy", seed: Optional[int] = None):
    """Open the window and run the game until it is closed"""
    config = config if config is not None else GameConfig()
    window = AsteroidsWindow(config, difficulty=difficulty)
    simulation = Simulation(config, random.Random(seed))
    loop = FrameLoop(
        simulation,
        window.scheduler,
        window.inputs,
        render_sink=window,
        hud=window,
    )
    window.attach(loop)
    logger.info("Window %dx%d open, difficulty %s", config.width, config.height, difficulty)
    arcade.run()
    return window.best_score
