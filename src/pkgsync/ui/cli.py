from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pkgsync.app import POST_INSTALL_EVENT, POST_UPDATE_EVENT, InstallHook, sync_registry
from pkgsync.config import ConfigurationError, configure_logging, get_sync_config
from pkgsync.domain.reconciliation import all_errors, first_error

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from pkgsync.app import SyncRegistryResult
    from pkgsync.config import SyncConfig

log = logging.getLogger(__name__)


def _add_run_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root-dir",
        type=Path,
        help="Project root used to locate files and shorten paths (default: cwd)",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        help="Installed-packages manifest written by the dependency manager",
    )
    parser.add_argument(
        "--installer",
        type=str,
        help="Installer tag owned by this run (defaults to config)",
    )
    parser.add_argument(
        "--no-build",
        action="store_true",
        help="Do not launch the build step after synchronising",
    )
    parser.add_argument(
        "--all-load-errors",
        action="store_true",
        help="Show every recorded load error per package instead of the first one",
    )
    parser.add_argument(
        "--ansi",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force (or disable) colour output in the build step",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise the package registry with installed packages"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Run one registry synchronisation")
    _add_run_options(sync)

    hook = subparsers.add_parser(
        "hook",
        help="Handle dependency-manager lifecycle notifications",
    )
    hook.add_argument(
        "events",
        nargs="+",
        choices=(POST_INSTALL_EVENT, POST_UPDATE_EVENT),
        help="Notifications to dispatch, in order",
    )
    _add_run_options(hook)

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> SyncConfig:
    config = get_sync_config(root_dir=args.root_dir)
    manifest: Path | None = args.manifest
    if manifest is not None and not manifest.is_absolute():
        manifest = config.root_dir / manifest
    if args.installer is not None and not args.installer.strip():
        raise ConfigurationError("Installer tag must not be blank")
    return config.with_overrides(
        installed_manifest=manifest,
        installer=args.installer,
        run_build=False if args.no_build else None,
    )


def _log_summary(result: SyncRegistryResult | None) -> None:
    if result is None:
        return
    mutations = result.reconciliation.mutations
    if not mutations and not result.reconciliation.failures:
        log.info("Package registry is up to date")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        config = _build_config(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    ansi = parsed_args.ansi if parsed_args.ansi is not None else sys.stdout.isatty()
    display = all_errors if parsed_args.all_load_errors else first_error

    def run() -> SyncRegistryResult:
        return sync_registry(config=config, display=display, ansi=ansi)

    try:
        if parsed_args.command == "sync":
            _log_summary(run())
        elif parsed_args.command == "hook":
            hook = InstallHook(run)
            for event in parsed_args.events:
                _log_summary(hook.dispatch(event))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during registry synchronisation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run_cli() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run_cli()
