"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from gradlesync import ConfigError, MergeError, ModelLoadError, ScriptEditError
from gradlesync.cli import commands
from gradlesync.cli.parser import build_parser

_COMMANDS = {
    "inspect": commands.run_inspect,
    "plan": commands.run_plan,
    "build": commands.run_build,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return _COMMANDS[args.command](args)
    except (ConfigError, ModelLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (MergeError, ScriptEditError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
