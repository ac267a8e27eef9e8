"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys

import pygame

from canvas_pong.core.match import Match
from canvas_pong.gui.pointer_input import PointerInput
from canvas_pong.gui.pygame_renderer import PygameRenderer
from canvas_pong.utils.config import game_config
from canvas_pong.utils.config import load_config_from_file

logger = logging.getLogger(__name__)

# Posted by the pygame timer every TICK_INTERVAL_MS
TICK_EVENT = pygame.USEREVENT + 1


class GameApp:
    """Runs one match in a window, ticking it at a fixed cadence"""

    def __init__(self) -> None:
        """Initialize the application"""
        self.renderer = PygameRenderer()
        self.match = Match(self.renderer.width, self.renderer.height)
        self.pointer_input = PointerInput(self.match.right_paddle)

        self.tick_interval = game_config.TICK_INTERVAL_MS
        self.running = False

    def start(self) -> None:
        """Start the tick timer"""
        self.running = True
        pygame.time.set_timer(TICK_EVENT, self.tick_interval)
        logger.debug("Tick timer started with a %d ms interval", self.tick_interval)

    def stop_ticking(self) -> None:
        """Cancel the tick timer, the window stays open"""
        pygame.time.set_timer(TICK_EVENT, 0)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a single event"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == TICK_EVENT:
            self.on_tick()
        else:
            self.pointer_input.handle_event(event)

    def on_tick(self) -> None:
        """Advance the match by one tick"""
        if self.match.is_game_over():
            return

        events = self.match.tick(self.renderer)
        if events["game_over"]:
            self.stop_ticking()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Canvas Pong...")
        self.start()

        try:
            while self.running:
                self.handle_event(pygame.event.wait())
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.stop_ticking()
        self.renderer.cleanup()
        print("Canvas Pong closed properly.")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Canvas Pong against the computer")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        print(f"Configuration file not found: {args.config}")
        return 1

    try:
        GameApp().run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    return 0


if __name__ == "__main__":
    sys.exit(main())
