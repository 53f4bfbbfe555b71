"""Command-line argument parsing for worktree-vibes."""

import argparse

from worktree_vibes.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactive picker for git worktrees: switch, create and delete them",
        epilog="After switching, the selected worktree path is printed to stdout so a shell "
        "function can cd into it.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"worktree-vibes {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the worktrees of the current repository and exit (no TUI)",
    )
    parser.add_argument(
        "--set-default-path",
        metavar="PATH",
        help="Set the directory new worktrees of this repository are created in, then exit",
    )
    parser.add_argument(
        "--force-remove",
        action="store_true",
        help="Remove marked worktrees even if they have local changes (git worktree remove --force)",
    )
    parser.add_argument(
        "--no-remote",
        action="store_true",
        help="Only offer local branches when creating worktrees",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Default path store (default: $WORKTREE_VIBES_CONFIG or ~/.worktree-vibes/worktree-vibes.json)",
    )

    return parser.parse_args(argv)
