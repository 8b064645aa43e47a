# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/cli/parser.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence, Tuple

from ..config.config_loader import Config
from ..core.logger import Log, c
from .help_texts import USAGE_EXAMPLES, YAML_EXAMPLE


class HelpFormatter(argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
    """Combines raw description formatting with default value display in help."""


def _build_epilog() -> str:
    return (
        c("Examples:\n", "cyan", ["bold"])
        + c(USAGE_EXAMPLES, "cyan")
        + "\n"
        + c("YAML config:\n", "cyan", ["bold"])
        + c(YAML_EXAMPLE, "cyan")
    )


def _add_global_config_logging(p: argparse.ArgumentParser) -> None:
    from .. import __version__

    p.add_argument(
        "--config",
        action="append",
        default=[],
        help="YAML/JSON config file (repeatable; later overrides earlier).",
    )
    p.add_argument("--dump-config", action="store_true", help="Print merged config and exit.")
    p.add_argument("--version", action="version", version=__version__)
    p.add_argument("-v", "--verbose", action="count", default=0, help="Verbosity: -v, -vv, -vvv")
    p.add_argument("-q", "--quiet", action="count", default=0, help="Only log errors.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Write logs to file.")
    p.add_argument("--json-logs", dest="json_logs", action="store_true", help="Emit NDJSON logs on stderr.")


def _add_decode(sub: Any) -> None:
    d = sub.add_parser(
        "decode",
        help="Decode a raw (type, bytes) pair.",
        formatter_class=HelpFormatter,
    )
    d.add_argument("--type", dest="type", default=None, help="Type tag: REG_SZ, SZ, 7, 0xb ...")
    src = d.add_mutually_exclusive_group(required=True)
    src.add_argument("--hex", dest="hex", default=None, help="Payload as hex (spaces, ':' and ',' allowed).")
    src.add_argument("--file", dest="file", default=None, help="Read the payload bytes from a file ('-' for stdin).")
    d.add_argument(
        "--as",
        dest="project",
        choices=("typed", "str", "u32", "u64", "wide", "raw"),
        default="typed",
        help="Projection to print.",
    )
    d.add_argument("--indent", dest="indent", type=int, default=None, help="JSON indent.")


def _add_encode(sub: Any) -> None:
    e = sub.add_parser(
        "encode",
        help="Encode a value into (type, bytes).",
        formatter_class=HelpFormatter,
    )
    e.add_argument("--type", dest="type", default=None, help="Type tag: REG_SZ, SZ, 7, 0xb ...")
    e.add_argument(
        "--value",
        dest="values",
        action="append",
        default=[],
        help="Value (repeat for REG_MULTI_SZ; hex for binary kinds; ints accept 0x..).",
    )
    e.add_argument("--indent", dest="indent", type=int, default=None, help="JSON indent.")


def _add_tags(sub: Any) -> None:
    sub.add_parser("tags", help="List registry type tags.", formatter_class=HelpFormatter)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="regvalue",
        description=c("regvalue: Windows registry value codec", "green", ["bold"]),
        formatter_class=HelpFormatter,
        epilog=_build_epilog(),
    )
    _add_global_config_logging(p)
    # config-only keys still need a dest on the parser
    p.set_defaults(default_type=None, indent=None)

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True
    _add_decode(sub)
    _add_encode(sub)
    _add_tags(sub)
    return p


def _build_preparser() -> argparse.ArgumentParser:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", action="append", default=[])
    pre.add_argument("-v", "--verbose", action="count", default=0)
    pre.add_argument("-q", "--quiet", action="count", default=0)
    pre.add_argument("--log-file", dest="log_file", default=None)
    pre.add_argument("--json-logs", dest="json_logs", action="store_true")
    pre.add_argument("--dump-config", action="store_true")
    return pre


def _load_merged_config(logger: Optional[logging.Logger], cfgs: Sequence[str]) -> Dict[str, Any]:
    if not cfgs:
        return {}
    return Config.load_many(logger, Config.expand_configs(logger, list(cfgs)))


def parse_args_with_config(
    argv: Optional[Sequence[str]] = None,
    logger: Optional[logging.Logger] = None,
) -> Tuple[argparse.Namespace, Dict[str, Any], logging.Logger]:
    """
    Flow:
      Phase 0: parse only the global flags needed to locate config/logging
      Phase 1: load + merge config files
      Phase 2: apply config as parser defaults
      Phase 3: full parse (CLI wins)
      Phase 4: reconfigure logging if config changed the logging knobs
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    pre = _build_preparser()
    args0, _rest = pre.parse_known_args(argv)

    if logger is None:
        logger = Log.setup(args0.verbose, args0.log_file, quiet=args0.quiet, json_logs=args0.json_logs)

    conf = _load_merged_config(logger, args0.config)

    if args0.dump_config:
        print(json.dumps(conf, indent=2, sort_keys=True, default=str))
        raise SystemExit(0)

    parser = build_parser()
    Config.apply_as_defaults(logger, parser, conf)
    args = parser.parse_args(argv)

    logging_changed = any(
        getattr(args, k, None) != getattr(args0, k, None) for k in ("verbose", "quiet", "log_file", "json_logs")
    )
    if logging_changed and logger.name == "regvalue":
        logger = Log.setup(int(args.verbose or 0), args.log_file, quiet=int(args.quiet or 0), json_logs=bool(args.json_logs))

    return args, conf, logger
