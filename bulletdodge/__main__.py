"""
__main__.py
-----------
Command line entry point.

Usage:
    python -m bulletdodge                        # Open a window and play
    python -m bulletdodge --seed 42              # Reproducible bullet pattern
    python -m bulletdodge --headless-frames 600  # Simulate 10 s without a window
"""

import argparse
import sys

from bulletdodge.core.debug.debug_logger import LoggerConfig


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Bullet Dodge arcade prototype")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the bullet spawner")
    parser.add_argument("--headless-frames", type=int, default=None, metavar="N",
                        help="Run N fixed steps without a visible window and exit")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable trace-level logging")

    args = parser.parse_args(argv)

    if args.verbose:
        LoggerConfig.LOG_LEVEL = "VERBOSE"

    # Imported late: pulls in pygame
    from bulletdodge.core.runtime.main_loop import MainLoop

    if args.headless_frames is not None:
        MainLoop(seed=args.seed, headless=True).run_headless(args.headless_frames)
        return 0

    MainLoop(seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
