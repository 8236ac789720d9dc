"""Command-line interface for lgremote.

Maps a verb and a target (a device name or ``all``) to a fleet
operation and prints one line per device.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from lgremote.config.settings import Settings, load_settings
from lgremote.fleet.dispatcher import ALL_DEVICES, DeviceResult, FleetDispatcher, Operation
from lgremote.fleet.registry import DeviceNotFoundError, Registry
from lgremote.protocol.endpoints import Endpoints
from lgremote.transport.base import Transport
from lgremote.utils.logging import setup_logging

logger = logging.getLogger(__name__)

# (aliases, help, progress message, success message)
_COMMANDS: dict[Operation, tuple[list[str], str, str, str]] = {
    Operation.ENABLE_3D: (["e"], "Enable 3D mode", "Enabling", "Enabled 3D"),
    Operation.DISABLE_3D: (["d"], "Disable 3D mode", "Disabling", "Disabled 3D"),
    Operation.QUERY_3D: (["q"], "Query the 3D state", "Checking", "3D State: {state}"),
    Operation.DISPLAY_PAIRING_KEY: (
        ["r"], "Show the pairing key on screen", "Display key for", "Displaying pairing key",
    ),
    Operation.POWER_OFF: (["p"], "Power off", "Powering off", "Powered off"),
}

_ALIASES = {
    alias: operation
    for operation, (aliases, *_rest) in _COMMANDS.items()
    for alias in aliases
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lgremote",
        description="Control a cluster of networked TVs",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to the YAML/JSON configuration file (default: ./tv_config.json)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="With 'all', handle one TV at a time instead of all at once",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for operation, (aliases, help_text, *_messages) in _COMMANDS.items():
        sub = subparsers.add_parser(operation.value, aliases=aliases, help=help_text)
        sub.add_argument("target", help=f"TV name or '{ALL_DEVICES}'")

    subparsers.add_parser("list", help="List the configured TVs")

    return parser.parse_args(argv)


def _build_transport(settings: Settings) -> Transport:
    from lgremote.transport.http_backend import HttpTransport

    return HttpTransport(timeout=settings.transport.timeout)


def _report(operation: Operation, result: DeviceResult) -> str:
    if not result.success:
        return f"{result.name}: Failed"
    message = _COMMANDS[operation][3].format(state=result.three_d_state.value)
    if operation is Operation.QUERY_3D:
        return f"{result.name} {message}"
    return f"{result.name}: {message}"


async def _dispatch(
    settings: Settings, registry: Registry, operation: Operation, target: str, parallel: bool
) -> int:
    """Run one operation and print the per-device report."""
    if target != ALL_DEVICES and target not in registry:
        print(str(DeviceNotFoundError(target)))
        return 1

    progress = _COMMANDS[operation][2]
    names = registry.names if target == ALL_DEVICES else [target]
    for name in names:
        print(f"{progress}: {name}")

    async with _build_transport(settings) as transport:
        dispatcher = FleetDispatcher(
            registry,
            transport,
            endpoints=Endpoints(
                port=settings.transport.port,
                base_path=settings.transport.base_path,
            ),
            key_codes=settings.keys,
            settle_delay=settings.control.settle_delay,
        )
        results = await dispatcher.dispatch(operation, target, parallel=parallel)

    for result in results:
        print(_report(operation, result))
    return 0 if all(r.success for r in results) else 1


def _list_devices(registry: Registry) -> int:
    if not len(registry):
        print("No TVs configured")
        return 1
    for device in registry:
        paired = "paired" if device.is_paired else "not paired"
        print(f"{device.name}\t{device.address}\t{paired}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the lgremote CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    try:
        registry = Registry.from_settings(settings)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    if args.command == "list":
        return _list_devices(registry)

    operation = _ALIASES.get(args.command) or Operation(args.command)
    parallel = settings.control.parallel and not args.sequential
    logger.debug("Running %s on %s", operation.value, args.target)
    return asyncio.run(_dispatch(settings, registry, operation, args.target, parallel))


if __name__ == "__main__":
    sys.exit(main())
