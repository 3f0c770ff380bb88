"""
brickpi-color - Read an NXT color sensor on a BrickPi sensor port.

Usage:
    brickpi-color                          # Read the configured port and mode
    brickpi-color --port S2 --mode ambient # Read a specific port and mode
    brickpi-color --next                   # Cycle to the next mode, then read
    brickpi-color --json                   # Output as JSON
    brickpi-color --buses                  # Show available bus backends
    brickpi-color --scalar 6               # Script the simulated bus
    brickpi-color --channels 300 20 500 0  # Script the simulated bus channels
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .bus import SensorPort, discover_backends, open_bus
from .color import RGBColor
from .config import (
    check_full_scale,
    configured_full_scale,
    configured_mode,
    configured_port,
    load_config,
    parse_port,
)
from .driver import ColorSensorDriver
from .errors import BusError
from .modes import SensingMode
from .observation import SensorObservation

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def show_buses(console: Console) -> None:
    """Display registered bus backends in a rich table."""
    backends = discover_backends()
    if not backends:
        console.print("[yellow]No sensor bus backends registered.[/]")
        return

    table = Table(title="Sensor buses", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("name", style="bold", no_wrap=True)
    table.add_column("description")
    table.add_column("available", justify="center")
    for backend in backends:
        mark = "[green]yes[/]" if backend["available"] else "[red]no[/]"
        table.add_row(backend["name"], backend["display_name"], mark)
    console.print(table)


def format_reading(
    driver: ColorSensorDriver, observation: SensorObservation, rgb: RGBColor
) -> Table:
    """Build the table shown for one sensor reading."""
    table = Table(
        title=f"{driver.sensor_name} on port {SensorPort(driver.port).name}",
        box=box.SIMPLE,
        show_header=False,
        padding=(0, 1),
        min_width=40,
    )
    table.add_column("field", style="cyan", no_wrap=True)
    table.add_column("value")

    table.add_row("mode", f"{observation.mode.value} ({driver.count_of_modes()} modes)")
    table.add_row("raw", str(observation.value))
    if observation.mode is SensingMode.FULL_COLOR:
        table.add_row("color", observation.text)
    else:
        table.add_row("level", f"{observation.text}%")
    table.add_row("rgb", f"{rgb.as_tuple()} [{rgb.to_hex()}]{rgb.to_hex()}[/]")
    table.add_row("time", observation.timestamp.strftime("%H:%M:%S"))
    return table


def full_scale_arg(value: str) -> int:
    """argparse type for --full-scale."""
    try:
        return check_full_scale(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def script_bus(bus, port: int, scalar: int | None, channels: list[int] | None) -> None:
    """Load scripted values into a bus that supports it."""
    if scalar is None and channels is None:
        return
    if not hasattr(bus, "set_scalar_value"):
        raise BusError(f"{bus.name} does not accept scripted values")
    if scalar is not None:
        bus.set_scalar_value(port, scalar)
    if channels is not None:
        bus.set_channel_array(port, channels)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read an NXT color sensor on a BrickPi")
    parser.add_argument("--port", type=str, help="Sensor port (S1-S4 or 0-3)")
    parser.add_argument(
        "--mode",
        type=str,
        help="Sensing mode (" + ", ".join(m.value for m in SensingMode) + ")",
    )
    parser.add_argument("--bus", type=str, help="Bus backend name")
    parser.add_argument("--next", action="count", default=0, help="Select the next mode before reading (repeatable)")
    parser.add_argument(
        "--previous", action="count", default=0, help="Select the previous mode before reading (repeatable)"
    )
    parser.add_argument("--scalar", type=int, help="Scalar value for the simulated bus")
    parser.add_argument(
        "--channels", type=int, nargs=4, metavar=("R", "G", "B", "BG"), help="Channel samples for the simulated bus"
    )
    parser.add_argument("--full-scale", type=full_scale_arg, help="Raw reading treated as 100%%")
    parser.add_argument("--config", type=Path, help="Config file path")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--buses", action="store_true", help="Show available bus backends")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    console = Console()

    if args.buses:
        show_buses(console)
        return 0

    config = load_config(args.config)
    try:
        port = parse_port(args.port) if args.port else configured_port(config)
        mode = SensingMode.from_name(args.mode) if args.mode else configured_mode(config)
        full_scale = args.full_scale if args.full_scale is not None else configured_full_scale(config)
    except ValueError as e:
        parser.error(str(e))

    try:
        bus = open_bus(args.bus or config["bus"])
        driver = ColorSensorDriver(port, mode, bus=bus, full_scale=full_scale)
        for _ in range(args.next):
            driver.select_next_mode()
        for _ in range(args.previous):
            driver.select_previous_mode()
        script_bus(bus, port, args.scalar, args.channels)

        observation = driver.update_sensor()
        rgb = driver.read_rgb_color()
    except BusError as e:
        logger.debug("Sensor read failed", exc_info=True)
        console.print(f"[red]Error:[/] {e}")
        return 1

    if args.json:
        data = observation.to_dict()
        data["rgb"] = list(rgb.as_tuple())
        print(json.dumps(data, indent=2))
    else:
        console.print(format_reading(driver, observation, rgb))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
