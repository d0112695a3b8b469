"""pygame front end driving :class:`~orbitsandbox.simulation.Simulation`.

The viewer owns the frame loop and calls :meth:`Simulation.advance` once per
rendered frame; everything physical happens in the core.
"""
import argparse
from importlib.metadata import version, PackageNotFoundError
import logging

import pygame
import pygame.gfxdraw

from . import constants as C
from .camera import Camera
from .presets import SCENARIOS
from .simulation import Simulation
from .utils import mass_to_display, status_to_display, time_scale_to_display, time_to_display

try:
    _PACKAGE_VERSION = version("orbitsandbox")
except PackageNotFoundError:
    _PACKAGE_VERSION = "0.0.0"

logger = logging.getLogger(__name__)

SCENARIO_KEYS = {
    pygame.K_1: SCENARIOS[0],
    pygame.K_2: SCENARIOS[1],
    pygame.K_3: SCENARIOS[2],
    pygame.K_4: SCENARIOS[3],
}


class Viewer:
    """Interactive window around a :class:`Simulation`."""

    def __init__(self, simulation=None, init_pygame: bool = True):
        self.simulation = simulation if simulation is not None else Simulation()
        self.camera = Camera()
        self.focus = "COM"
        self.running = False

        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
            pygame.display.set_caption(f"Orbit Sandbox v{_PACKAGE_VERSION}")
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, 20)
        else:
            self.screen = None
            self.clock = None
            self.font = None

    # ------------------------------------------------------------------
    def handle_key(self, key) -> None:
        """Apply a single key press to the simulation."""
        sim = self.simulation
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            sim.toggle_pause()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            sim.set_time_scale(sim.time_scale + C.TIME_SCALE_INCREMENT)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            sim.set_time_scale(sim.time_scale - C.TIME_SCALE_INCREMENT)
        elif key == pygame.K_c:
            sim.collisions_enabled = not sim.collisions_enabled
        elif key == pygame.K_t:
            sim.show_trails = not sim.show_trails
        elif key == pygame.K_r:
            sim.clear_trails()
        elif key == pygame.K_a:
            sim.add_random_body()
        elif key == pygame.K_x:
            sim.remove_all()
        elif key in SCENARIO_KEYS:
            sim.load_scenario(SCENARIO_KEYS[key])

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def hud_lines(self):
        sim = self.simulation
        return [
            f"Scenario: {sim.scenario or '-'}",
            f"Bodies: {len(sim.bodies)}",
            f"Status: {status_to_display(sim.paused)}",
            f"Time Scale: {time_scale_to_display(sim.time_scale)}",
            f"Elapsed: {time_to_display(sim.simulation_time)}",
            f"Collisions: {'on' if sim.collisions_enabled else 'off'}",
            f"New body: {mass_to_display(C.DEFAULT_NEW_BODY_MASS)} {C.DEFAULT_NEW_BODY_TYPE}",
        ]

    # ------------------------------------------------------------------
    def _visible_trail_runs(self, trail, size):
        """Split a trail into runs of consecutive on-screen points."""
        runs = [[]]
        for p in trail:
            screen_pos = self.camera.world_to_screen(p)
            if self.camera.is_visible(screen_pos, 0, size):
                runs[-1].append(tuple(screen_pos))
            elif runs[-1]:
                runs.append([])
        return [run for run in runs if len(run) > 1]

    def draw(self) -> None:
        """Render the current frame.

        Bodies and trail points outside the window are culled; gfxdraw only
        accepts 16-bit coordinates.
        """
        if self.screen is None:
            return
        self.screen.fill(C.BLACK)
        cam = self.camera
        size = self.screen.get_size()
        for body in self.simulation.bodies:
            color = pygame.Color(body.color)
            if self.simulation.show_trails and len(body.trail) > 1:
                for run in self._visible_trail_runs(body.trail, size):
                    pygame.draw.aalines(self.screen, color, False, run)
            screen_pos = cam.world_to_screen(body.pos)
            radius = cam.screen_radius(body.radius)
            if not cam.is_visible(screen_pos, radius, size):
                continue
            x, y = (int(v) for v in screen_pos)
            pygame.gfxdraw.filled_circle(self.screen, x, y, radius, color)
            pygame.gfxdraw.aacircle(self.screen, x, y, radius, color)

        if self.font is not None:
            for row, line in enumerate(self.hud_lines()):
                label = self.font.render(line, True, C.HUD_COLOR)
                self.screen.blit(label, (10, 10 + row * 18))
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main application loop."""
        if self.screen is None or self.clock is None:
            raise RuntimeError("Viewer cannot run without pygame initialized")
        self.running = True
        screen_center = (C.WIDTH / 2, C.HEIGHT / 2)
        while self.running:
            self.clock.tick(C.FPS)
            self.handle_events()
            self.simulation.advance()
            self.camera.update_focus(self.focus, self.simulation.bodies, screen_center)
            self.draw()
        pygame.quit()


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive N-body sandbox")
    parser.add_argument("--scenario", choices=SCENARIOS, default="solar-system")
    parser.add_argument(
        "--time-scale",
        type=float,
        default=1.0,
        help=f"Simulated days per frame ({C.MIN_TIME_SCALE} to {C.MAX_TIME_SCALE})",
    )
    parser.add_argument("--no-collisions", action="store_true", help="Disable merging")
    parser.add_argument("--hide-trails", action="store_true", help="Do not draw trails")
    parser.add_argument("--seed", type=int, help="Seed for randomly added bodies")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def simulation_from_args(args):
    return Simulation(
        args.scenario,
        time_scale=args.time_scale,
        collisions_enabled=not args.no_collisions,
        show_trails=not args.hide_trails,
        seed=args.seed,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    simulation = simulation_from_args(args)
    logger.info("starting viewer with scenario %s", args.scenario)
    Viewer(simulation).run()


if __name__ == "__main__":  # pragma: no cover - manual tool
    main()
