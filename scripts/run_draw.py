import argparse
import logging
import sys
from pathlib import Path

from football_draw.core.config import settings
from football_draw.core.errors import ValidationError
from football_draw.core.log import configure_logging
from football_draw.services.draw_engine import DrawEngine
from football_draw.services.randomizer import make_rng

logger = logging.getLogger(__name__)


def read_teams(path: Path) -> list[str]:
    # Одна команда на строку, пустые строки пропускаем.
    with path.open(encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.app_name}: 36 teams, 4 baskets, full match list")
    parser.add_argument("--input", default=settings.teams_file, help="Teams file, one name per line")
    parser.add_argument("--output", default=settings.results_file, help="Results file (stdout if omitted)")
    parser.add_argument("--format", choices=["text", "markup"], default=settings.output_format)
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed for a reproducible draw")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Проводит одну жеребьевку по файлу команд и выводит результат."""
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Teams file not found: {input_path}", file=sys.stderr)
        return 1

    engine = DrawEngine(read_teams(input_path), rng=make_rng(args.seed))
    try:
        engine.generate_draw()
    except ValidationError as exc:
        print(f"input file error: {exc}", file=sys.stderr)
        return 1

    rendered = engine.format_markup() if args.format == "markup" else engine.format_text()
    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        logger.info("Results written to %s", args.output)
    else:
        sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    # Запускаем жеребьевку из CLI.
    sys.exit(main())
