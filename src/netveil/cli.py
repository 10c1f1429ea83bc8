import errno
import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from netveil.core.config import NetVeilConfig, ReplacementType, TrackerKind
from netveil.diagnostics import print_error
from netveil.engine import list_obfuscators

app = typer.Typer(help="netveil: consistent IP and MAC address scrubbing CLI")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _read_input(value: str) -> str:
    """Read ``value`` as a file if it names one, otherwise treat it as text."""
    path = Path(value)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return value
    except ValueError:
        # embedded NUL bytes can never name a file
        return value
    except OSError as e:
        if e.errno in (errno.ENAMETOOLONG, errno.EISDIR, errno.EINVAL):
            return value
        raise


def _check_seed(seed: object) -> None:
    """Raise ValueError unless ``seed`` maps obfuscator names to string mappings."""
    if not isinstance(seed, dict):
        raise ValueError("Seed must be a JSON object keyed by obfuscator name.")
    for name, mapping in seed.items():
        if not isinstance(mapping, dict) or not all(
            isinstance(value, str) for value in mapping.values()
        ):
            raise ValueError(
                f"Seed entry '{name}' must map original addresses to replacement strings."
            )


def _apply_overrides(
    config: NetVeilConfig,
    obfuscators: Optional[List[str]],
    replacement_type: Optional[ReplacementType],
    tracker: Optional[TrackerKind],
) -> NetVeilConfig:
    entries = [entry.model_dump() for entry in config.obfuscators]
    if obfuscators:
        entries = [{"type": name} for name in obfuscators]
    for entry in entries:
        if replacement_type is not None:
            entry["replacement_type"] = replacement_type
        if tracker is not None:
            entry["tracker"] = tracker
    return NetVeilConfig(obfuscators=entries)


@app.command("scrub", help="Scrub IP and MAC addresses from a file or text.")
def scrub(
    input: str = typer.Argument(..., help="Input text or path to file"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write scrubbed text to this file"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to YAML/JSON/TOML config file"
    ),
    replacement_type: Optional[ReplacementType] = typer.Option(
        None,
        "--replacement-type",
        "-r",
        help="Override the replacement type of every obfuscator",
    ),
    obfuscators: Optional[List[str]] = typer.Option(
        None,
        "--obfuscator",
        "-O",
        help="Obfuscator to run (repeatable): ipv4 | ipv4_pattern | ipv6 | mac",
    ),
    tracker: Optional[TrackerKind] = typer.Option(
        None, "--tracker", help="Override the tracker of every obfuscator"
    ),
    report_path: Optional[str] = typer.Option(
        None, "--report", help="Write the replacement report as JSON to this file"
    ),
    seed_path: Optional[str] = typer.Option(
        None, "--seed", help="Start from a report written by an earlier run"
    ),
    is_json: bool = typer.Option(
        False, "--json", help="Treat input as JSON and scrub keys and values"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    show_time: bool = typer.Option(
        False, "--time", help="Show timing information for the operation"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed logs"),
):
    """Scrub network identifiers in text or files."""
    from netveil.core.config import load_config
    from netveil.engine import build_obfuscators
    from netveil.exceptions import (
        ConfigMissingError,
        FatalReplacementError,
        ScrubbedKeyCollisionError,
        UnsupportedObfuscatorError,
    )
    from netveil.utils import Timer, scrub_structure
    from netveil.utils.logging import setup_logging

    setup_logging(verbose)

    if not force:
        for target, label in ((output, "Output"), (report_path, "Report")):
            if target and Path(target).exists():
                print_error(
                    err_console,
                    "File Exists",
                    f"{label} file '{target}' already exists.",
                    suggestion="Use --force to overwrite.",
                )
                raise typer.Exit(code=1)

    load_timer = Timer()
    process_timer = Timer()

    load_timer.start()
    try:
        config = load_config(config_path, verbose=verbose)
        config = _apply_overrides(config, obfuscators, replacement_type, tracker)
        chain = build_obfuscators(config)
    except ConfigMissingError as e:
        print_error(
            err_console,
            "Configuration Error",
            str(e),
            suggestion="Please check the file path or run without --config to use defaults.",
        )
        raise typer.Exit(code=1)
    except (ValidationError, UnsupportedObfuscatorError) as e:
        print_error(err_console, "Configuration Error", str(e))
        raise typer.Exit(code=1)
    load_timer.stop()

    seed = None
    if seed_path:
        try:
            seed = json.loads(Path(seed_path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            print_error(err_console, "Seed Error", str(e))
            raise typer.Exit(code=1)
        try:
            _check_seed(seed)
        except ValueError as e:
            print_error(err_console, "Seed Error", f"{seed_path}: {e}")
            raise typer.Exit(code=1)

    text = _read_input(input)

    process_timer.start()
    try:
        if seed is not None:
            chain.initialize(seed)

        if is_json:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                print_error(err_console, "JSON Error", str(e))
                raise typer.Exit(code=1)
            try:
                scrubbed = json.dumps(scrub_structure(data, chain), indent=2)
            except ScrubbedKeyCollisionError as e:
                print_error(
                    err_console,
                    "JSON Error",
                    str(e),
                    suggestion="Use consistent replacements so every address keeps its own key.",
                )
                raise typer.Exit(code=1)
        else:
            scrubbed = chain(text)
        report = chain.report()
    except FatalReplacementError as e:
        # the mapping is inconsistent: nothing from this run may be written
        print_error(
            err_console,
            "Consistency Error",
            str(e),
            suggestion="The run was aborted and no report was written.",
        )
        raise typer.Exit(code=2)
    process_timer.stop()

    if output:
        Path(output).write_text(scrubbed, encoding="utf-8")
        logger.info("Scrubbed output written to %s", output)
    else:
        typer.echo(scrubbed)

    if report_path:
        Path(report_path).write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Report written to %s", report_path)

    if verbose:
        for name, mapping in report.items():
            err_console.print(f"{name}: {len(mapping)} replacements")

    if show_time:
        load_ms = load_timer.elapsed_ms
        process_ms = process_timer.elapsed_ms
        err_console.print(
            f"[dim]Load: {load_ms:.2f}ms | Processing: {process_ms:.2f}ms | "
            f"Total: {load_ms + process_ms:.2f}ms[/]"
        )


@app.command("inspect", help="Show available obfuscators.")
def inspect():
    """Show available obfuscators."""
    table = Table(title="Available Obfuscators")
    table.add_column("Obfuscator", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    for name, desc in list_obfuscators():
        table.add_row(name, desc)
    console.print(table)


@app.command("version", help="Show netveil version.")
def version():
    """Show netveil version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as package_version

    try:
        __version__ = package_version("netveil")
    except PackageNotFoundError:
        __version__ = "dev"
    typer.echo(f"netveil {__version__}")
    return __version__


def main():
    app()


if __name__ == "__main__":
    import sys

    sys.exit(main())
