# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/__main__.py
from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .cli.commands import COMMANDS
from .cli.parser import parse_args_with_config
from .core.exceptions import RegValueError, format_exception_for_cli


def _print_stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout

    # Phase 1: parse (config errors can happen here, before a usable logger)
    try:
        args, _conf, logger = parse_args_with_config(argv)
    except RegValueError as e:
        _print_stderr(f"💥 ERROR    {format_exception_for_cli(e)}")
        return e.code

    # Phase 2: run the command
    try:
        return COMMANDS[args.command](logger, args, out)
    except RegValueError as e:
        logger.error(format_exception_for_cli(e, verbose=int(args.verbose or 0)))
        return e.code
    except (TypeError, ValueError) as e:
        # bad user input caught by value constructors (range, kind)
        logger.error(format_exception_for_cli(e, verbose=int(args.verbose or 0)))
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C).")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
