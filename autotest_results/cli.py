"""CLI entry point for rendering test results to the terminal."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.style import Style
from rich.text import Text

from autotest_results.kinds import label_for
from autotest_results.models.result import Renderable
from autotest_results.result_loader import load_results
from autotest_results.theme import (
    OutputTheme,
    ThemeLoadError,
    ThemeProvider,
    color_for,
    load_theme,
)

log = logging.getLogger(__name__)

LABEL_WIDTH = 8


def format_line(
    result: Renderable, theme: ThemeProvider, selected: bool
) -> Text | None:
    """Build the styled output for a result, None if it is never shown."""
    color = color_for(result.kind, theme)
    if color.is_transparent:
        return None

    text = Text()
    text.append(
        f"{label_for(result.kind):<{LABEL_WIDTH}}",
        style=Style(color=color.hex, bold=True),
    )
    text.append(result.output_string(selected), style=Style(color=color.hex))
    return text


def run(
    results_path: Path,
    theme_path: Path | None = None,
    selected: bool = False,
    console: Console | None = None,
) -> int:
    """Render every result in a JSON lines file and return exit code."""
    if console is None:
        console = Console()

    try:
        theme = OutputTheme() if theme_path is None else load_theme(theme_path)
    except ThemeLoadError as e:
        log.error("%s", e)
        return 2

    try:
        lines = results_path.read_text(encoding="utf-8").split("\n")
    except (OSError, UnicodeDecodeError) as e:
        log.error("Cannot read results file %s: %s", results_path, e)
        return 2

    shown = 0
    for result in load_results(lines):
        if (line := format_line(result, theme, selected)) is not None:
            console.print(line)
            shown += 1

    log.info("Rendered %d result(s) from %s", shown, results_path)
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render structured test results with themed colors"
    )
    parser.add_argument(
        "results",
        type=Path,
        help="JSON lines file with one result record per line",
    )
    parser.add_argument(
        "--theme",
        type=Path,
        default=None,
        help="JSON file overriding output pane colors",
    )
    parser.add_argument(
        "--selected",
        action="store_true",
        help="Show full descriptions instead of first lines only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("autotest_results").setLevel(
        logging.DEBUG if args.verbose else logging.INFO
    )

    sys.exit(
        run(
            results_path=args.results,
            theme_path=args.theme,
            selected=args.selected,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    main()
