"""Command-line interface for worktree-vibes"""

import sys
from rich.console import Console
from rich.markup import escape
from .args import parse_args
from .core import WorktreeVibes
from .logging_config import setup_logging
from .config import Config
from .services.display_service import DisplayService

console = Console(stderr=True)


def _console_notify(message: str, severity: str = "information") -> None:
    """Print a notice on the console (CLI mode only)."""
    style = {"warning": "yellow", "error": "red"}.get(severity)
    if style:
        console.print(message, style=style, markup=False)
    else:
        console.print(message, markup=False)


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)
        interactive = not (parsed_args.list or parsed_args.set_default_path)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=interactive)

        config = Config(
            config_path=parsed_args.config,
            force_remove=parsed_args.force_remove,
            include_remote=not parsed_args.no_remote,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        session = WorktreeVibes(config, notify=_console_notify)

        if session.repo_root() is None:
            return 1

        if parsed_args.set_default_path:
            outcome = session.set_default_path(parsed_args.set_default_path)
            return 0 if outcome.ok else 1

        worktrees = session.load_worktrees()
        if not worktrees:
            _console_notify("No worktrees found", severity="warning")
            return 1

        if parsed_args.list:
            DisplayService(Console()).display_worktree_table(
                worktrees, session.marked, session.stored_default_path()
            )
            return 0

        # Launch the picker; notices go to Textual toasts from here on
        from worktree_vibes.tui import WorktreeVibesApp
        app = WorktreeVibesApp(session)
        selected_path = app.run()

        if selected_path:
            print(selected_path)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
