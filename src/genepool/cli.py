"""Command line interface for the project.

Commands:
- show-settings: print the resolved settings
- introns: solve the evolved-introns puzzle read from standard input
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Iterable

from pydantic import ValidationError

from genepool.config import (
    ConfigError,
    EvolutionConfig,
    Settings,
    configure_logging,
    get_settings,
    load_config,
)
from genepool.evolution import ConfigurationError, GenePool, run_evolution
from genepool.samples.introns import (
    DEFAULT_CONFIG,
    IntronsPhenotype,
    ProblemFormatError,
    format_solution,
    parse_problem,
    read_positions,
)

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="genepool CLI")
    parser.add_argument(
        "--structured-logs",
        dest="structured_logs",
        action="store_true",
        help="force JSON structured logs",
    )
    parser.add_argument(
        "--plain-logs",
        dest="structured_logs",
        action="store_false",
        help="force plain-text logs",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level for console and file handlers",
    )
    parser.set_defaults(structured_logs=None)

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show-settings", help="Print the resolved Settings")
    show.add_argument("--json", action="store_true", help="JSON output")

    introns = subparsers.add_parser(
        "introns", help="Solve the evolved-introns puzzle read from stdin"
    )
    introns.add_argument(
        "--config", type=str, help="YAML evolution config, also looked up in the configs dir"
    )
    introns.add_argument("--generations", type=int, help="Override generation count")
    introns.add_argument(
        "--population-size", type=int, help="Override population size (even)"
    )
    introns.add_argument("--seed", type=int, help="Override random seed")
    introns.add_argument("--json", action="store_true", help="JSON output")

    return parser


def _configure_logging(
    structured: bool | None, settings: Settings, command: str, level: str
) -> None:
    configure_logging(
        settings=settings,
        structured=structured,
        level=level,
        context={"command": command},
    )


def _print_payload(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for key, value in payload.items():
            print(f"{key}: {value}")


def _resolve_config(args: argparse.Namespace, settings: Settings) -> EvolutionConfig:
    config = (
        load_config(
            args.config,
            EvolutionConfig,
            search_dirs=(settings.configs_dir, settings.project_root),
        )
        if args.config
        else DEFAULT_CONFIG
    )
    overrides = {
        "generations": args.generations,
        "population_size": args.population_size,
        "seed": args.seed,
    }
    merged = config.model_dump()
    merged.update({key: value for key, value in overrides.items() if value is not None})
    if merged.get("seed") is None:
        merged["seed"] = settings.random_seed
    try:
        return EvolutionConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid evolution parameters:\n{exc}") from exc


def _run_introns(args: argparse.Namespace, settings: Settings) -> None:
    config = _resolve_config(args, settings)
    problem = parse_problem(sys.stdin)
    phenotype = IntronsPhenotype.from_problem(problem)
    pool = GenePool.from_config(phenotype, config)
    run = run_evolution(pool, config.generations)

    if args.json:
        decoded = phenotype.decode(run.best_specimen)
        payload = {
            "decoded": decoded,
            "positions": read_positions(decoded, phenotype.reads),
            "score": run.best_fitness,
            "specimen": [state.value for state in run.best_specimen],
            "config": config.model_dump(),
        }
        _print_payload(payload, as_json=True)
    else:
        print(format_solution(phenotype, run.best_specimen))


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    settings = get_settings()
    _configure_logging(args.structured_logs, settings, args.command, args.log_level)

    try:
        if args.command == "show-settings":
            payload = settings.model_dump(mode="json")
            _print_payload(payload, as_json=args.json)
        elif args.command == "introns":
            _run_introns(args, settings)
        else:  # pragma: no cover - argparse rejects unknown commands
            parser.error(f"Unknown command: {args.command}")

    except (ConfigError, ConfigurationError, ProblemFormatError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
