# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/config/config_loader.py
"""
YAML/JSON configuration for the regvalue CLI.

Files are merged left to right (later wins, nested mappings deep-merge) and
then applied as argparse defaults, so explicit CLI flags always override.
"""
from __future__ import annotations

import argparse
import glob
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from ..core.exceptions import ConfigError

# Keys the CLI understands; anything else is kept but reported.
KNOWN_KEYS = frozenset(
    {
        "verbose",
        "quiet",
        "log_file",
        "json_logs",
        "indent",
        "default_type",
    }
)


def _deep_merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _normalize_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    # YAML authors write both `log-file` and `log_file`
    return {str(k).replace("-", "_"): v for k, v in d.items()}


def load_config(path: str) -> Dict[str, Any]:
    """Load one YAML (or .json) file; the top level must be a mapping."""
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {p}: {e}", cause=e, context={"path": str(p)}) from e

    try:
        if p.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot parse config {p}: {e}", cause=e, context={"path": str(p)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"config {p} must be a mapping at the top level, got {type(data).__name__}",
            context={"path": str(p)},
        )
    return _normalize_keys(data)


class Config:
    @staticmethod
    def expand_configs(logger: Optional[logging.Logger], cfgs: Sequence[str]) -> List[str]:
        """Expand ~ and globs; a pattern that matches nothing is kept so load reports it."""
        out: List[str] = []
        for c in cfgs:
            pattern = str(Path(c).expanduser())
            hits = sorted(glob.glob(pattern))
            if not hits:
                out.append(pattern)
                continue
            out.extend(hits)
        if logger is not None:
            logger.debug("Config files: %s", out)
        return out

    @staticmethod
    def load_many(logger: Optional[logging.Logger], paths: Sequence[str]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for p in paths:
            conf = load_config(p)
            if logger is not None:
                unknown = sorted(set(conf) - KNOWN_KEYS)
                if unknown:
                    logger.warning("Ignoring unknown config keys in %s: %s", p, ", ".join(unknown))
            merged = _deep_merge(merged, conf)
        return merged

    @staticmethod
    def apply_as_defaults(logger: Optional[logging.Logger], parser: argparse.ArgumentParser, conf: Dict[str, Any]) -> None:
        """Only keys the parser knows become defaults; subparsers get them too."""
        dests = {a.dest for a in parser._actions} | set(parser._defaults)
        defaults = {k: v for k, v in conf.items() if k in dests}
        if defaults:
            parser.set_defaults(**defaults)
        for a in parser._actions:
            if isinstance(a, argparse._SubParsersAction):
                for sub in a.choices.values():
                    sub_dests = {x.dest for x in sub._actions}
                    sub_defaults = {k: v for k, v in conf.items() if k in sub_dests}
                    if sub_defaults:
                        sub.set_defaults(**sub_defaults)
        if logger is not None and defaults:
            logger.debug("Applied config defaults: %s", sorted(defaults))
