"""Pygame easing gallery.

Plots one curve at a time, animates a marker along it and shows a
``LogicalClock`` readout and the frame-rate label. Keys:

- Left/Right (or A/D): previous/next curve
- L: toggle lookup-table vs direct evaluation for the marker
- P: pause/resume the logical clock
- +/-: double/halve the logical clock speed
- Esc: quit

Library logic lives in the other sandtime modules; this is only the view.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import pygame

from .clock import Clock, MonotonicTimer, RealClock
from .config import SandConfig
from .fps import FrameCounter
from .logging_config import setup_logging
from .lut import TweenLUTCache
from .rtc import LogicalClock
from .tween import CURVES, Curve, evaluate, name_of, pingpong

logger = logging.getLogger(__name__)

WINDOW_SIZE = (960, 540)
SWEEP_PERIOD_S = 2.0
PLOT_SEGMENTS = 200
PLOT_Y_RANGE = (-0.5, 1.5)
MIN_SPEED = 0.125
MAX_SPEED = 64.0


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


class App:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font
        self._screens: list[Screen] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def update(self) -> None:
        if self._screens:
            self._screens[-1].update()

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)


@dataclass(frozen=True, slots=True)
class GallerySnapshot:
    """View model for the gallery (pure data)."""

    curve: Curve
    curve_name: str
    phase: float
    value: float
    use_lut: bool
    clock_text: str
    speed: float
    paused: bool
    fps_label: str


class GalleryScreen:
    def __init__(
        self,
        app: App,
        *,
        config: SandConfig,
        clock: Clock | None = None,
        cache: TweenLUTCache | None = None,
    ) -> None:
        self._app = app
        self._clock: Clock = clock if clock is not None else RealClock()
        self._cache = cache if cache is not None else TweenLUTCache(config.lut_samples)
        self._sweep = MonotonicTimer(self._clock)
        self._rtc = LogicalClock(clock=self._clock)
        self._frames = FrameCounter(
            clock=self._clock,
            window_s=config.fps_window_s,
            history=config.fps_history,
        )
        self._index = 0
        self._use_lut = True
        self._title_font = pygame.font.Font(None, 40)

    @property
    def curve(self) -> Curve:
        return CURVES[self._index]

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        key = event.key
        if key in (pygame.K_RIGHT, pygame.K_d):
            self._select(1)
        elif key in (pygame.K_LEFT, pygame.K_a):
            self._select(-1)
        elif key == pygame.K_l:
            self._use_lut = not self._use_lut
        elif key == pygame.K_p:
            if self._rtc.held:
                self._rtc.resume()
            else:
                self._rtc.pause()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self._rtc.set_speed(min(MAX_SPEED, self._rtc.speed * 2.0))
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self._rtc.set_speed(max(MIN_SPEED, self._rtc.speed / 2.0))
        elif key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
            self._app.quit()

    def _select(self, delta: int) -> None:
        self._index = (self._index + delta) % len(CURVES)
        self._sweep.reset()
        logger.debug("gallery curve -> %s", name_of(self.curve))

    def _phase(self) -> float:
        t = (self._sweep.elapsed_s() % SWEEP_PERIOD_S) / SWEEP_PERIOD_S
        return pingpong(t)

    def update(self) -> None:
        self._rtc.update()
        self._frames.tick()

    def snapshot(self) -> GallerySnapshot:
        phase = self._phase()
        curve = self.curve
        value = self._cache.lookup(curve, phase) if self._use_lut else evaluate(curve, phase)
        return GallerySnapshot(
            curve=curve,
            curve_name=name_of(curve),
            phase=phase,
            value=value,
            use_lut=self._use_lut,
            clock_text=self._rtc.serialize(),
            speed=self._rtc.speed,
            paused=self._rtc.held,
            fps_label=self._frames.label,
        )

    def render(self, surface: pygame.Surface) -> None:
        snap = self.snapshot()
        w, h = surface.get_size()
        bg = (10, 10, 14)
        axis = (70, 76, 96)
        line = (120, 180, 255)
        marker = (255, 210, 90)
        text_main = (235, 235, 245)
        text_muted = (180, 180, 190)

        surface.fill(bg)

        margin = max(20, min(60, w // 16))
        plot = pygame.Rect(margin, margin + 60, max(120, w - margin * 2), max(120, h - margin * 2 - 110))
        pygame.draw.rect(surface, axis, plot, 1)

        lo, hi = PLOT_Y_RANGE

        def to_px(x: float, y: float) -> tuple[int, int]:
            px = plot.left + int(round(x * (plot.width - 1)))
            py = plot.bottom - 1 - int(round((y - lo) / (hi - lo) * (plot.height - 1)))
            return px, py

        # Reference lines at 0 and 1.
        pygame.draw.line(surface, axis, to_px(0.0, 0.0), to_px(1.0, 0.0))
        pygame.draw.line(surface, axis, to_px(0.0, 1.0), to_px(1.0, 1.0))

        points = [to_px(i / PLOT_SEGMENTS, evaluate(snap.curve, i / PLOT_SEGMENTS)) for i in range(PLOT_SEGMENTS + 1)]
        pygame.draw.lines(surface, line, False, points, 2)
        pygame.draw.circle(surface, marker, to_px(snap.phase, snap.value), 7)

        title = self._title_font.render(snap.curve_name, True, text_main)
        surface.blit(title, (margin, margin))

        mode = "LUT" if snap.use_lut else "direct"
        state = "paused" if snap.paused else f"x{snap.speed:g}"
        status = f"{snap.clock_text}  [{state}]   {mode}   {snap.fps_label}"
        surface.blit(self._app.font.render(status, True, text_muted), (margin, h - margin - 10))


def run(*, max_frames: int | None = None, event_injector: Callable[[int], None] | None = None) -> int:
    config = SandConfig.from_env()
    setup_logging(config.log_level_no)

    pygame.init()
    pygame.display.set_caption("Sandtime Easing Gallery")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    font = pygame.font.Font(None, 28)
    clock = pygame.time.Clock()

    app = App(surface=surface, font=font)
    app.push(GalleryScreen(app, config=config))

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.update()
            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(config.target_fps)
    finally:
        pygame.quit()

    return 0
