# src/gib/cli.py

import argparse
import json
import logging
import platform
import sys
from difflib import get_close_matches
from pathlib import Path
from typing import Any

from .actions import get_metadata
from .config import (
    PROPERTIES,
    Configuration,
    MakeBehavior,
    find_pyproject,
    is_enabled,
    load_project_properties,
    parse_definitions,
    resolve_configuration,
)
from .constants import LEVEL_ORDER
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT
from .modules import Module, changed_modules, create_path_map
from .utils import shorten_path_for_display


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # "unrecognized arguments: --buidl ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description="Select the modules to rebuild from version-control changes.",
    )

    # --- Properties ---
    parser.add_argument(
        "-D",
        "--define",
        action="append",
        metavar="KEY=VALUE",
        help="Set a property (e.g. -D gib.buildUpstream=always). Repeatable.",
    )
    parser.add_argument(
        "--pyproject",
        help="pyproject.toml holding [tool.gib] (default: nearest one upward).",
    )

    # --- Orchestrator make behavior ---
    parser.add_argument(
        "--make-behavior",
        choices=[b.value for b in MakeBehavior],
        default=None,
        help="The orchestrator's own upstream/downstream build request.",
    )
    parser.add_argument(
        "-am",
        "--also-make",
        action="store_true",
        help="Shorthand: orchestrator also builds upstream modules.",
    )
    parser.add_argument(
        "-amd",
        "--also-make-dependents",
        action="store_true",
        help="Shorthand: orchestrator also builds downstream modules.",
    )

    # --- Modules and changes ---
    parser.add_argument(
        "-m",
        "--module",
        action="append",
        metavar="DIR",
        help="Module root directory. Repeatable.",
    )
    parser.add_argument(
        "--changed",
        action="append",
        metavar="PATH",
        help="Changed file (relative to --root or absolute). Repeatable.",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Working tree root for relative changed paths (default: cwd).",
    )

    # --- Output ---
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved configuration as JSON on stdout.",
    )
    parser.add_argument(
        "--list-properties",
        action="store_true",
        help="List every recognized property with its alias and default.",
    )
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _initialize_logger(args: argparse.Namespace) -> None:
    logger = getAppLogger()
    if args.log_level:
        logger.setLevel(args.log_level)
    logger.debug(
        "Runtime: Python %s (%s)",
        platform.python_version(),
        platform.python_implementation(),
    )


def _make_behavior_from_args(args: argparse.Namespace) -> MakeBehavior | None:
    if args.make_behavior:
        return MakeBehavior(args.make_behavior)
    if args.also_make and args.also_make_dependents:
        return MakeBehavior.BOTH
    if args.also_make:
        return MakeBehavior.UPSTREAM
    if args.also_make_dependents:
        return MakeBehavior.DOWNSTREAM
    return None


def _list_properties() -> None:
    logger = getAppLogger()
    for prop in PROPERTIES:
        line = f"{prop.full_name()} (default: {prop.default!r})"
        deprecated = prop.deprecated_full_name()
        if deprecated:
            line += f" [deprecated alias: {deprecated}]"
        logger.info(line)


def _log_configuration(configuration: Configuration) -> None:
    logger = getAppLogger()
    logger.info("Upstream build mode: %s", configuration.build_upstream_mode.value)
    logger.info("Build downstream: %s", configuration.build_downstream)
    for name, value in configuration.sources.items():
        logger.debug("  %s = %r", name, value)


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = getAppLogger()

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)
        _initialize_logger(args)

        # --- Early exits ---
        if args.version:
            meta = get_metadata()
            logger.info("%s %s (%s)", PROGRAM_DISPLAY, meta.version, meta.commit)
            return 0
        if args.list_properties:
            _list_properties()
            return 0

        # --- Gather raw properties ---
        cwd = Path.cwd().resolve()
        overrides = parse_definitions(args.define)
        project_properties: dict[str, str] = {}
        pyproject = find_pyproject(cwd, args.pyproject)
        if pyproject is not None:
            project_properties = load_project_properties(pyproject)
            logger.info(
                "🔧 Using project properties: %s",
                shorten_path_for_display(pyproject, cwd=cwd),
            )

        if not is_enabled(overrides, project_properties):
            logger.info("Incremental build selection is disabled.")
            return 0

        # --- Resolve ---
        behavior = _make_behavior_from_args(args)
        configuration = resolve_configuration(
            overrides, project_properties, lambda: behavior
        )
        _log_configuration(configuration)

        payload: dict[str, Any] = {"configuration": configuration.to_dict()}

        # --- Attribute changes ---
        if args.module:
            root = Path(args.root).resolve() if args.root else cwd
            modules = [Module(Path(m).resolve().name, Path(m)) for m in args.module]
            path_map = create_path_map(modules)
            impacted = changed_modules(
                args.changed or [],
                path_map,
                root=root,
                exclude=configuration.exclude_path_regex,
            )
            for module in impacted:
                logger.info(
                    "📦 Changed: %s (%s)",
                    module.name,
                    shorten_path_for_display(module.basedir, cwd=cwd, root=root),
                )
            if not impacted:
                logger.info("No changed modules.")
            payload["changed_modules"] = [m.name for m in impacted]

        if args.json:
            print(json.dumps(payload, indent=2))

    except (FileNotFoundError, ValueError, TypeError, RuntimeError) as e:
        # controlled termination
        logger.error("%s", e, exc_info=logger.isEnabledFor(logging.DEBUG))
        return 1

    except Exception as e:  # noqa: BLE001
        logger.critical(
            "Unexpected internal error: %s",
            e,
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
        return 1

    else:
        return 0
