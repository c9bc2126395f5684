#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
import pyperclip
from rich.console import Console
from rich.markup import escape

from .commands import GitCommitCommand, command_for_path
from .config import DEFAULT_CONFIG_FILENAME, EDITOR_ENV_VARS, Config
from .history import DEFAULT_REVISION, HistoryValidator
from .observers import ConsoleLogObserver, FileLogObserver, SessionObserver

console = Console()
err_console = Console(stderr=True)


def print_config_list(repo_path: Path) -> None:
    config = Config.load(repo_path)
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<20} {'Source':<10}")
    console.print("-" * 50)

    def print_setting(name: str, value: object, source: str):
        console.print(f"{name:<20} {str(value):<20} {source:<10}")

    if config.editor:
        editor_source = source
    elif any(os.environ.get(env_var) for env_var in EDITOR_ENV_VARS):
        editor_source = "environment"
    else:
        editor_source = "default"
    print_setting("editor", config.get_editor(), editor_source)
    print_setting("git_command", config.git_command, source)
    print_setting("always_log", config.always_log, source)
    print_setting("log_file", config.log_file or "None", source)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


def show_config_dir(repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    config_path_str = str(config_path)

    # Create default config file if it doesn't exist
    if not config_path.exists():
        Config().save(repo_path)
        console.print("[yellow]Created new config file with default values[/yellow]")

    pyperclip.copy(config_path_str)
    console.print(f"[green]Config file location:[/green] {config_path_str}")
    console.print("[green]Path copied to clipboard![/green]")


def build_observers(config: Config, log_file: Optional[Path]) -> List[SessionObserver]:
    observers: List[SessionObserver] = []
    log_file_path = log_file or config.get_log_file()
    if log_file_path:
        observers.append(FileLogObserver(str(log_file_path)))
    return observers


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--validate",
    is_flag=True,
    help="Treat ARGS as revision ranges (default HEAD) and check every commit message in them",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log sessions and validation results (overrides config setting)",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    args: Tuple[str, ...],
    validate: bool,
    path: Path,
    log_file: Optional[Path],
    config_list: bool,
    config_dir: bool,
    version: bool,
):
    """
    Write emoji-prefixed commit messages, or check existing ones.

    Called by git as its editor with the file to edit:
    COMMIT_EDITMSG opens the interactive composer, any other file
    (rebase todo, hunk edit, merge message) opens in your regular editor.

    Called without arguments it runs `git commit` with itself as the editor.

    With --validate, every commit in the given revision ranges is checked
    and the exit code is 1 if any of them breaks a rule.

    Configuration can be set in .emojicommit.toml in the repository root.
    Command line options override configuration file settings.
    """
    exit_code = 0
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        repo_path = path.absolute()

        if config_list:
            print_config_list(repo_path)
            return

        if config_dir:
            show_config_dir(repo_path)
            return

        config = Config.load(repo_path)
        observers = build_observers(config, log_file)

        if validate:
            validator = HistoryValidator(
                repo_path, observers=[ConsoleLogObserver(console), *observers]
            )
            report = validator.validate(list(args) or [DEFAULT_REVISION])
            exit_code = 0 if report.passed else 1
        elif args:
            command = command_for_path(Path(args[0]), config, console=err_console)
            command.add_observer(ConsoleLogObserver(err_console))
            for observer in observers:
                command.add_observer(observer)
            exit_code = command.execute()
        else:
            exit_code = GitCommitCommand(config.git_command, console=err_console).execute()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        exit_code = 1
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
