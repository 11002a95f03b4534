"""CLI commands for inspecting the ad dispatch setup."""

import argparse
import json
import sys
from pathlib import Path

from .adapters.custom_rotation import InventoryError, load_inventory
from .config.runtime import get_settings
from .observability import configure_logging, metrics_snapshot
from .wiring import build_ads_manager


def simulate(
    calls: int,
    interval: int = 0,
    custom_interval: int | None = None,
    max_custom: int | None = None,
    remove_after: int | None = None,
) -> list[dict]:
    """Run ``calls`` interstitial requests headless and return each decision."""
    settings = get_settings()
    update: dict = {"platform": "headless"}
    if custom_interval is not None:
        update["custom_ads_interval"] = custom_interval
    if max_custom is not None:
        update["max_custom_ads_per_session"] = max_custom
    manager = build_ads_manager(settings.model_copy(update=update))

    results: list[dict] = []
    for call in range(1, calls + 1):
        if remove_after is not None and call == remove_after + 1:
            manager.remove_all()
        decision = manager.request_interstitial(interval)
        row = {"call": call}
        row.update(decision.to_dict())
        results.append(row)
    return results


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Inspect the ad dispatch policy")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Simulate command
    sim_parser = subparsers.add_parser("simulate", help="Run interstitial requests and print each decision")
    sim_parser.add_argument("--calls", type=int, default=10, help="Number of interstitial requests")
    sim_parser.add_argument(
        "--interval",
        type=int,
        default=0,
        help="Call-site interval passed to every request (default: 0, no throttle)",
    )
    sim_parser.add_argument("--custom-interval", type=int, default=None, help="Override custom ads interval")
    sim_parser.add_argument("--max-custom", type=int, default=None, help="Override max custom ads per session")
    sim_parser.add_argument(
        "--remove-after",
        type=int,
        default=None,
        help="Remove all ads after this many requests",
    )
    sim_parser.add_argument("--metrics", action="store_true", help="Print decision counts at the end")

    # Config command
    subparsers.add_parser("config", help="Show effective settings")

    # Inventory command
    inv_parser = subparsers.add_parser("inventory", help="Validate and list a custom ad inventory")
    inv_parser.add_argument("--file", type=Path, default=None, help="Path to JSON file with custom ads")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "simulate":
        try:
            rows = simulate(
                args.calls,
                interval=args.interval,
                custom_interval=args.custom_interval,
                max_custom=args.max_custom,
                remove_after=args.remove_after,
            )
        except InventoryError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        for row in rows:
            print(json.dumps(row))
        if args.metrics:
            print(json.dumps(metrics_snapshot(), indent=2))
    elif args.command == "config":
        print(json.dumps(settings.model_dump(mode="json"), indent=2))
    elif args.command == "inventory":
        path = args.file or settings.custom_ads_file
        if path is None:
            print("Error: no inventory file; pass --file or set AD_DISPATCH_CUSTOM_ADS_FILE.", file=sys.stderr)
            sys.exit(1)
        try:
            ads = load_inventory(path)
        except InventoryError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"{len(ads)} custom ads in {path}")
        for ad in ads:
            print(f"  {ad.ad_id}: {ad.headline} -> {ad.app_url}")
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
