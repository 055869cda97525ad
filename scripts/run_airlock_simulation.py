#!/usr/bin/env python3
"""Airlock Simulation - drive a full cycle against in-memory devices.

Builds one simulated airlock per configured name (an open interior door, a
closed exterior door, a vent and a set of indicator lights), connects the
registry, dispatches a cycle to one airlock and keeps ticking while the
shared timer stays armed. Every lifecycle event is written to the log.

Configuration comes from the environment (a .env file is loaded first);
see airlock.config.airlock_config for the variables.

Usage:
    python scripts/run_airlock_simulation.py [options]

Options:
    --airlock NAME       Airlock to cycle (default: first configured name)
    --names A,B          Override AIRLOCK_NAMES
    --vacuum             Start with the room open to vacuum (ingress cycle)
    --stuck-door         Make the interior door ignore close commands
    --max-ticks N        Stop after N ticks even if still cycling (default: 20)
    --fast               Do not wait for the timer delay between ticks
"""

import argparse
import sys
import time
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from airlock.application.observability import begin_trigger
from airlock.application.services import AirlockRegistryService
from airlock.config import AirlockConfig, split_names
from airlock.domain.errors import UnknownAirlockError
from airlock.domain.value_objects import VentStatus
from airlock.infrastructure.adapters import StructlogAirlockEventEmitter
from airlock.infrastructure.observability import (
    configure_structlog,
    get_logger_for_service,
)
from airlock.infrastructure.stubs import (
    CycleTimerStub,
    DeviceCatalogStub,
    DoorStub,
    LightStub,
    VentStub,
)

# Load environment variables
load_dotenv()

DEFAULT_SIMULATION_NAMES = ("Hangar",)


def build_catalog(
    config: AirlockConfig, vacuum: bool, stuck_door: bool
) -> DeviceCatalogStub:
    """Create simulated devices for every configured airlock."""
    catalog = DeviceCatalogStub(config)
    for name in config.airlock_names:
        tag = config.wrap_tag(name)
        catalog.add_door(DoorStub(f"{tag} Interior Door", closed=False, stuck=stuck_door))
        catalog.add_door(DoorStub(f"{tag} Exterior Door", closed=True))
        if vacuum:
            vent = VentStub(
                f"{tag} Air Vent",
                status=VentStatus.DEPRESSURIZING,
                oxygen=0.4,
                airtight=False,
                settle_on_drive=True,
            )
        else:
            vent = VentStub(f"{tag} Air Vent", settle_on_drive=True)
        catalog.add_vent(vent)
        catalog.add_light(LightStub(f"{tag} Cycle Light"))
        catalog.add_light(LightStub(f"{tag} Interior Light"))
        catalog.add_light(LightStub(f"{tag} Exterior Light"))
    return catalog


def run(args: argparse.Namespace) -> int:
    """Run the simulation.

    Returns:
        Process exit code: 0 if the cycle completed, 1 otherwise.
    """
    config = AirlockConfig.from_environment()
    if args.names:
        config = replace(config, airlock_names=split_names(args.names, config.delimiter))
    if not config.airlock_names:
        config = replace(config, airlock_names=DEFAULT_SIMULATION_NAMES)

    configure_structlog(environment=config.environment)
    log = get_logger_for_service("AirlockSimulation", component="simulation")

    timer = CycleTimerStub(name=config.timer_name)
    registry = AirlockRegistryService(
        discovery=build_catalog(config, args.vacuum, args.stuck_door),
        timer=timer,
        emitter=StructlogAirlockEventEmitter(),
    )

    begin_trigger("connect")
    log.info(
        "simulation_started",
        airlocks=list(config.airlock_names),
        timer=timer.name,
        delay_seconds=config.timer_delay_seconds,
    )
    registry.connect(config)

    target = args.airlock or config.airlock_names[0]
    begin_trigger("cycle")
    try:
        registry.dispatch_cycle(target)
    except UnknownAirlockError as exc:
        log.error("simulation_aborted", reason=str(exc))
        return 1

    ticks = 0
    while timer.is_armed and ticks < args.max_ticks:
        if not args.fast:
            time.sleep(timer.delay_seconds)
        begin_trigger("tick")
        registry.tick_all()
        ticks += 1

    if timer.is_armed:
        log.warning("simulation_stopped_while_cycling", ticks=ticks, airlock=target)
        return 1

    log.info("simulation_completed", ticks=ticks, airlock=target)
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Simulate an airlock cycle against in-memory devices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cycle the first configured airlock toward the pressurized side
  python scripts/run_airlock_simulation.py --fast

  # Cycle toward vacuum
  python scripts/run_airlock_simulation.py --vacuum --fast

  # Watch a cycle stall on a door that never closes
  python scripts/run_airlock_simulation.py --stuck-door --max-ticks 5 --fast
""",
    )
    parser.add_argument("--airlock", type=str, help="Airlock to cycle")
    parser.add_argument("--names", type=str, help="Override AIRLOCK_NAMES")
    parser.add_argument(
        "--vacuum",
        action="store_true",
        help="Start with the room open to vacuum (ingress cycle)",
    )
    parser.add_argument(
        "--stuck-door",
        action="store_true",
        help="Make the interior door ignore close commands",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=20,
        help="Stop after N ticks even if still cycling (default: 20)",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Do not wait for the timer delay between ticks",
    )
    sys.exit(run(parser.parse_args()))


if __name__ == "__main__":
    main()
