# -*- coding: utf-8 -*-
"""Command line entry point: `sudokugen generate` and `sudokugen serve`."""
import argparse
import asyncio
import os
import random
from typing import List, Optional

from sudokugen.common.config import Config, load_config
from sudokugen.common.constants import CONFIG_PATH_ENV_VAR, OutputFormat
from sudokugen.common.formatter import mask_grid, to_json, to_text
from sudokugen.engine.generator import PuzzleGenerator
from sudokugen.utils.log import get_logger


def _load(args: argparse.Namespace) -> Config:
    config_path = args.config or os.environ.get(CONFIG_PATH_ENV_VAR)
    config = load_config(config_path) if config_path else Config()
    if args.log_level is not None:
        config.log.level = args.log_level
    return config


def generate(args: argparse.Namespace) -> str:
    config = _load(args)
    if args.size is not None:
        config.generator.size = args.size
    if args.seed is not None:
        config.generator.seed = args.seed
    if args.blanks is not None:
        config.display.blank_count = args.blanks
    elif args.size is not None:
        # the configured blank count is sized for the configured grid
        config.display.blank_count = min(config.display.blank_count, args.size * args.size)
    if args.format is not None:
        config.display.output_format = OutputFormat(args.format)
    config.check_and_update()
    get_logger("sudokugen", config.log.level)

    rng = random.Random(config.generator.seed)
    result = PuzzleGenerator(size=config.generator.size, rng=rng).generate()
    rows = mask_grid(
        result.solution, config.display.blank_count, config.display.placeholder, rng
    )
    if config.display.output_format == OutputFormat.TEXT:
        output = to_text(rows)
    else:
        output = to_json(rows)
    print(output)
    return output


def serve(args: argparse.Namespace) -> None:
    from sudokugen.service.app import run_app

    config = _load(args)
    if args.host is not None:
        config.service.listen_address = args.host
    if args.port is not None:
        config.service.port = args.port
    config.check_and_update()
    get_logger("sudokugen", config.log.level)
    asyncio.run(run_app(config))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudokugen", description="Unique-solution Sudoku generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="Path to a yaml config file.")
    common.add_argument("--log-level", type=str, default=None, help="Override the log level.")

    gen_parser = subparsers.add_parser("generate", parents=[common], help="Print one puzzle.")
    gen_parser.add_argument("--size", type=int, default=None, help="Grid side length.")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    gen_parser.add_argument("--blanks", type=int, default=None, help="Number of hidden cells.")
    gen_parser.add_argument(
        "--format", type=str, choices=["json", "text"], default=None, help="Output format."
    )
    gen_parser.set_defaults(func=generate)

    serve_parser = subparsers.add_parser("serve", parents=[common], help="Serve puzzles over HTTP.")
    serve_parser.add_argument("--host", type=str, default=None, help="Listen address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port.")
    serve_parser.set_defaults(func=serve)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
