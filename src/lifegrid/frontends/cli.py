"""Command-line interface for Conway's Game of Life."""

import argparse
import signal
import sys
import threading
import time
import numpy as np
from typing import Callable, List, Optional

from ..core.grid import Grid, DEFAULT_PROBABILITY
from ..core.game import GameOfLife, DEFAULT_DELAY
from ..core.patterns import PatternLibrary

DEFAULT_SIZE = 30
DEFAULT_START_DELAY = 1.0
CLEAR_SCREEN = "\033[H\033[2J"

MODE_RANDOM = "random"
MODE_MANUAL = "manual"


class ConsoleGameOfLife:
    """Console front end: picks a start configuration and prints each generation."""

    def __init__(
        self,
        rows: int = DEFAULT_SIZE,
        cols: int = DEFAULT_SIZE,
        clear_screen: bool = True,
        verbose: bool = False,
        input_func: Optional[Callable[[str], str]] = None,
        pattern_library: Optional[PatternLibrary] = None,
    ):
        """Initialize console interface.

        Args:
            rows: Number of grid rows
            cols: Number of grid columns
            clear_screen: Emit ANSI clear codes before each generation
            verbose: Print progress details
            input_func: Function used to read a line of user input (defaults to input)
            pattern_library: Patterns available to --pattern
        """
        self.rows = rows
        self.cols = cols
        self.clear_screen = clear_screen
        self.verbose = verbose
        self.input_func = input_func or input
        self.pattern_library = pattern_library or PatternLibrary()

        self.grid = Grid(rows, cols)
        self.game = GameOfLife(self.grid)

    def _read_line(self, prompt: str) -> str:
        try:
            return self.input_func(prompt)
        except EOFError:
            return ""

    def print_header(self) -> None:
        print("-------------------------------------------")
        print(f"   CONWAY'S GAME OF LIFE ({self.rows}x{self.cols})")
        print("-------------------------------------------")

    def prompt_choice(self) -> str:
        """Ask whether to start randomly or from manual input.

        Returns:
            MODE_RANDOM if the answer is 'random' (any case), MODE_MANUAL otherwise
        """
        print("1. Type 'Random' to generate a random start.")
        print("2. Type any other key to enter the grid manually.")
        choice = self._read_line("> Choice: ").strip()
        return MODE_RANDOM if choice.lower() == MODE_RANDOM else MODE_MANUAL

    def read_manual_lines(self) -> List[str]:
        """Read one line of text per grid row.

        Returns:
            Exactly ``rows`` lines; rows missing at end of input are empty
        """
        print("\n[MANUAL INPUT MODE]")
        print(f"Enter {self.rows} lines of text.")
        print("Use '1' for LIVE cells and '0' for DEAD cells.")
        print("Example: 001000101...")

        lines = []
        for i in range(self.rows):
            lines.append(self._read_line(f"Row {i + 1:02d}: "))
        return lines

    def initialize_random(self, probability: float = DEFAULT_PROBABILITY, seed: Optional[int] = None) -> None:
        """Seed the grid randomly.

        Args:
            probability: Chance each cell starts alive
            seed: Optional seed for a reproducible start
        """
        rng = np.random.default_rng(seed)
        self.grid.initialize_random(probability, rng)
        print("Grid initialized randomly.")
        if self.verbose:
            print(f"Initial population: {self.grid.population} cells (rate: {probability:.2%})")

    def initialize_manual(self) -> None:
        """Seed the grid from rows typed by the user."""
        self.grid.initialize_from_input(self.read_manual_lines())
        if self.verbose:
            print(f"Initial population: {self.grid.population} cells")

    def initialize_pattern(self, name: str) -> bool:
        """Place a library pattern in the middle of the grid.

        Args:
            name: Pattern name

        Returns:
            True if the pattern was found and placed
        """
        pattern = self.pattern_library.get_pattern(name)
        if pattern is None:
            return False

        min_row, min_col, _, _ = pattern.get_bounding_box()
        height, width = pattern.get_size()
        offset_row = max(0, (self.rows - height) // 2) - min_row
        offset_col = max(0, (self.cols - width) // 2) - min_col
        pattern.apply_to_grid(self.grid, offset_row, offset_col)
        if self.verbose:
            print(f"Loading pattern '{pattern.name}' at ({offset_row}, {offset_col})")
        return True

    def render_generation(self, game: GameOfLife) -> None:
        """Print the current generation, clearing the console first if enabled."""
        if self.clear_screen:
            sys.stdout.write(CLEAR_SCREEN)
            sys.stdout.flush()

        print(game.grid.render())
        if self.verbose:
            print(f"Generation {game.generation} - population {game.population}")

    def run(
        self,
        delay: float = DEFAULT_DELAY,
        max_generations: Optional[int] = None,
        stop_event: Optional[threading.Event] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> int:
        """Run the simulation loop.

        Returns:
            Number of generations advanced
        """
        return self.game.run(
            delay=delay,
            max_generations=max_generations,
            stop_event=stop_event,
            on_generation=self.render_generation,
            sleep=sleep or time.sleep,
        )

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life in the console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for random or manual start on a 30x30 grid
  lifegrid

  # Random start, reproducible, one generation per half second
  lifegrid --mode random --seed 42 --delay 0.5

  # Watch a glider for 40 generations without clearing the screen
  lifegrid --pattern Glider -s 12 -g 40 --no-clear
        """,
    )

    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help=f"Square grid size (default: {DEFAULT_SIZE})")

    parser.add_argument("--rows", type=int, help="Number of rows (default: --size)")

    parser.add_argument("--cols", type=int, help="Number of columns (default: --size)")

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between generations (default: {DEFAULT_DELAY})",
    )

    parser.add_argument(
        "--start-delay",
        type=float,
        default=DEFAULT_START_DELAY,
        help=f"Seconds to wait before the first generation (default: {DEFAULT_START_DELAY})",
    )

    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=DEFAULT_PROBABILITY,
        help=f"Live cell probability for random starts (default: {DEFAULT_PROBABILITY})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible starts")

    parser.add_argument(
        "-m",
        "--mode",
        choices=[MODE_RANDOM, MODE_MANUAL],
        help="Start mode; prompts when omitted",
    )

    parser.add_argument("--pattern", type=str, help="Start from a named pattern instead")

    parser.add_argument("-g", "--generations", type=int, help="Stop after N generations (default: run until interrupted)")

    parser.add_argument("--no-clear", action="store_true", help="Do not clear the console between generations")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress details")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    rows = args.rows if args.rows is not None else args.size
    cols = args.cols if args.cols is not None else args.size

    if rows <= 0:
        errors.append("Rows must be positive")
    if cols <= 0:
        errors.append("Columns must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.start_delay < 0:
        errors.append("Start delay must be non-negative")

    if not 0.0 <= args.probability <= 1.0:
        errors.append("Probability must be between 0.0 and 1.0")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the console interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        ConsoleGameOfLife().list_patterns()
        return 0

    if not validate_args(args):
        return 1

    rows = args.rows if args.rows is not None else args.size
    cols = args.cols if args.cols is not None else args.size

    stop_event = threading.Event()

    def _handle_terminate(signum, frame):
        stop_event.set()

    previous_handler = signal.signal(signal.SIGTERM, _handle_terminate)

    try:
        console = ConsoleGameOfLife(rows, cols, clear_screen=not args.no_clear, verbose=args.verbose)
        console.print_header()

        if args.pattern:
            if not console.initialize_pattern(args.pattern):
                print(f"Error: Pattern '{args.pattern}' not found")
                print("Use --list-patterns to see available patterns")
                return 1
        else:
            mode = args.mode or console.prompt_choice()
            if mode == MODE_RANDOM:
                console.initialize_random(args.probability, args.seed)
            else:
                console.initialize_manual()

        print("Starting simulation... (Press Ctrl+C to stop)")
        time.sleep(args.start_delay)

        generations = console.run(delay=args.delay, max_generations=args.generations, stop_event=stop_event)

        if args.verbose:
            print(f"Ran {generations} generations, final population {console.game.population}")

        return 0

    except KeyboardInterrupt:
        print("\nSimulation stopped.")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1
    finally:
        signal.signal(signal.SIGTERM, previous_handler)


if __name__ == "__main__":
    sys.exit(main())
