"""CLI entry point for license-auditor."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from license_auditor import __version__
from license_auditor.analysis.compliance import check_license_compliance
from license_auditor.analysis.policy import PolicyStore, get_policy_store
from license_auditor.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_auditor.exceptions import InputError, LicenseAuditorError
from license_auditor.inputs.dependencies import load_dependencies
from license_auditor.inputs.readme import read_documentation
from license_auditor.logging import configure_logging
from license_auditor.output.terminal import TerminalFormatter

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


def _policy_store(policy_dir: str | None) -> PolicyStore:
    return get_policy_store(str(Path(policy_dir).resolve()) if policy_dir else None)


def _read_readme(readme_path: str | None, repo_path: str | None) -> str:
    """Get documentation text from an explicit README or a module checkout."""
    if readme_path is not None:
        path = Path(readme_path)
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise InputError(f"Cannot read README '{path}': {e}") from e
    if repo_path is not None:
        return read_documentation(Path(repo_path))
    return ""


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Auditor - Check third-party licenses against ASF policy.

    Classifies each dependency license as Category A (allowed),
    Category B (allowed when documented in the README) or Category X
    (prohibited), and reports everything that needs attention.

    \b
    Examples:
        license-auditor check dependencies.json --repo ./mod-search
        license-auditor normalize "(Apache-2.0) Apache Commons IO"
    """
    pass


@main.command()
@click.argument(
    "dependencies_file",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--readme",
    "readme_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="README file used to document Category B dependencies.",
)
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Module checkout; its README is used for documentation checks.",
)
@click.option(
    "--policy-dir",
    "policy_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding license-categories.json, license-variations.json "
    "and special-exceptions.json.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the verdict and issue reasons.",
)
@click.option(
    "--json-log",
    is_flag=True,
    default=False,
    help="Emit log messages as JSON lines on stderr.",
)
def check(
    dependencies_file: str,
    readme_path: str | None,
    repo_path: str | None,
    policy_dir: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    json_log: bool,
) -> None:
    """Check dependency licenses for ASF policy compliance.

    DEPENDENCIES_FILE is a JSON or YAML list of objects with name,
    version and licenses.

    \b
    Examples:
        license-auditor check deps.json
        license-auditor check deps.json --readme README.md
        license-auditor check deps.yaml --repo ./mod-search --quiet
        license-auditor check deps.json --policy-dir ./config
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")
    if readme_path and repo_path:
        raise click.UsageError("--readme and --repo are mutually exclusive.")

    configure_logging(verbose=verbose_flag, quiet=quiet_flag, json_log=json_log)

    try:
        store = _policy_store(policy_dir)
        dependencies = load_dependencies(Path(dependencies_file))
        doc_text = _read_readme(readme_path, repo_path)

        result = check_license_compliance(dependencies, doc_text, store)
        TerminalFormatter(console=_console, quiet=quiet_flag).format_compliance_result(
            result, total_dependencies=len(dependencies)
        )

        if not result.compliant:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseAuditorError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("licenses", nargs=-1, required=True)
@click.option(
    "--policy-dir",
    "policy_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding the license policy files.",
)
def normalize(licenses: tuple[str, ...], policy_dir: str | None) -> None:
    """Show how raw license strings normalize and categorize.

    \b
    Examples:
        license-auditor normalize "Apache License, Version 2.0"
        license-auditor normalize "(The MIT License) Project Lombok (org.projectlombok"
    """
    configure_logging(quiet=True)
    store = _policy_store(policy_dir)
    TerminalFormatter(console=_console).format_license_lookups(list(licenses), store)


def _display_error(error: LicenseAuditorError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(f"[red bold]Error: {error_type}: {error}[/red bold]")


if __name__ == "__main__":
    main()
