"""
Command Line Interface
Print the next instance size for a platform
"""

import argparse
import sys
from typing import List, Optional

from escalator.config_loader import get_config_loader
from escalator.engine import InstanceSizeEscalator
from escalator.errors import EscalationError
from escalator.logging_config import setup_structured_logging
from escalator.platform_detection import PlatformDetector
from escalator.platforms import Platform


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="escalate-instance",
        description="Compute the next larger instance size for a cloud platform",
    )
    parser.add_argument("identifier",
                        help="Current instance type, VM size, machine type, vCPU socket count or flavor")
    parser.add_argument("--platform", choices=[p.value for p in Platform], type=_platform_choice,
                        help="Platform (default: PLATFORM env, then detect from the cluster)")
    parser.add_argument("--steps", type=int, default=1,
                        help="Number of successive sizes to print (default: 1)")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def _platform_choice(value: str) -> str:
    for platform in Platform:
        if value.lower() in (platform.value.lower(), platform.name.lower()):
            return platform.value
    return value


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.steps < 1:
        parser.error("--steps must be at least 1")

    try:
        config = get_config_loader().get_config()
    except ValueError as e:
        parser.error(str(e))

    setup_structured_logging(
        log_level=args.log_level or config.log_level,
        log_format=config.log_format,
    )

    escalator = InstanceSizeEscalator(config)
    platform = args.platform or config.platform
    if platform is None:
        platform = PlatformDetector().detect()
        if platform is None:
            print("Error: could not detect platform, pass --platform or set PLATFORM", file=sys.stderr)
            return 1

    try:
        if args.steps == 1:
            print(escalator.escalate(args.identifier, platform))
            return 0

        sizes = list(escalator.ladder(args.identifier, platform, limit=args.steps))
    except EscalationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not sizes:
        print(f"Error: no larger size after {args.identifier}", file=sys.stderr)
        return 1
    for size in sizes:
        print(size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
