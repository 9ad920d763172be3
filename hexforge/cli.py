"""
CLI integration for component generation.

Builds the subcommand parsers and runs each command: load configuration,
generate, preview, confirm, commit, report.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table
from rich.tree import Tree

from .core.committer import (
    CommitAction,
    CommitError,
    CommitReport,
    FileSystemCommitter,
)
from .core.config import CONFIG_FILE_NAME, ConfigError, ConfigManager, load_config
from .core.generator import GenerationResult, generate_component
from .core.naming import to_camel_case
from .core.schema import (
    ADAPTER_FILE,
    HANDLER_FILE,
    MODEL_FILE,
    PORT_FILE,
    SERVICE_FILE,
    AdapterType,
    GeneratedArtifact,
    GenerationOptions,
)
from .logging_config import get_logger, setup_logging
from .project import domain_exists, find_ports_in_domain
from .registry import RegistryError, get_component_info, get_generator, get_registry

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

COMMAND_ALIASES = {
    "domain": ["cd"],
    "handler": ["ch"],
    "service": ["cs"],
    "port": ["cp"],
    "adapter": ["ca"],
}

# CLI flag -> file role, for the --<role>-file options
CUSTOM_FILE_FLAGS = {
    "model_file": MODEL_FILE,
    "service_file": SERVICE_FILE,
    "port_file": PORT_FILE,
    "adapter_file": ADAPTER_FILE,
    "handler_file": HANDLER_FILE,
}


def create_common_parser() -> argparse.ArgumentParser:
    """Options shared by every generation command."""
    parser = argparse.ArgumentParser(add_help=False)

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--path",
        "-p",
        default=".",
        help="Project root the files are generated into (default: current directory)",
    )
    output_group.add_argument(
        "--config-dir",
        metavar="DIR",
        default=None,
        help=f"Directory containing {CONFIG_FILE_NAME} (default: the --path root)",
    )
    output_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the files that would be generated without writing them",
    )
    output_group.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite files that already exist",
    )
    output_group.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Skip the confirmation prompt",
    )
    output_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging and generation metadata",
    )
    return parser


def _add_adapter_type(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--adapter-type",
        "-t",
        choices=AdapterType.values(),
        default=AdapterType.REPOSITORY.value,
        help="Adapter technology (default: repository)",
    )


def _add_domain_option(parser: argparse.ArgumentParser):
    parser.add_argument("--domain", "-d", help="Domain the component belongs to")


def _add_custom_file(parser: argparse.ArgumentParser, role_flag: str, label: str):
    parser.add_argument(
        f"--{role_flag}-file",
        metavar="PATH",
        help=f"Explicit output path for the {label} file, relative to --path",
    )


def create_generation_subparsers(subparsers) -> Dict[str, argparse.ArgumentParser]:
    """
    Create one subcommand per component kind.

    Args:
        subparsers: Subparser group from the main parser

    Returns:
        Mapping of kind to its parser
    """
    common = create_common_parser()
    parsers = {}

    # domain
    parser = subparsers.add_parser(
        "domain",
        aliases=COMMAND_ALIASES["domain"],
        parents=[common],
        help="Generate a domain: model, service, port and adapter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hexforge domain payment
  hexforge cd payment --adapter-type rest --no-model
  hexforge domain user --port-name UserRepository --dry-run
        """.strip(),
    )
    parser.add_argument("name", help="Domain name")
    _add_adapter_type(parser)
    toggles = parser.add_argument_group("sub-artifacts")
    toggles.add_argument("--no-model", action="store_true", help="Skip the model")
    toggles.add_argument("--no-service", action="store_true", help="Skip the service")
    toggles.add_argument(
        "--no-port", action="store_true", help="Skip the port and its adapter"
    )
    names = parser.add_argument_group("custom names")
    names.add_argument("--model-name", help="Model class name")
    names.add_argument("--service-name", help="Service class name")
    names.add_argument("--port-name", help="Port interface name")
    names.add_argument("--adapter-name", help="Adapter class name")
    for role_flag in ("model", "service", "port", "adapter"):
        _add_custom_file(parser, role_flag, role_flag)
    parser.set_defaults(func=_handle_generate, kind="domain")
    parsers["domain"] = parser

    # handler
    parser = subparsers.add_parser(
        "handler",
        aliases=COMMAND_ALIASES["handler"],
        parents=[common],
        help="Generate a Lambda handler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hexforge handler createUser
  hexforge ch createUser --domain user --schema --dto
        """.strip(),
    )
    parser.add_argument("name", help="Handler name")
    _add_domain_option(parser)
    parser.add_argument("--schema", action="store_true", help="Add a Zod schema file")
    parser.add_argument("--dto", action="store_true", help="Add a DTO file")
    parser.add_argument(
        "--service-name", help="Domain service to import (default: the domain name)"
    )
    _add_custom_file(parser, "handler", "handler")
    parser.set_defaults(func=_handle_generate, kind="handler")
    parsers["handler"] = parser

    # service
    parser = subparsers.add_parser(
        "service",
        aliases=COMMAND_ALIASES["service"],
        parents=[common],
        help="Generate a service inside a domain",
    )
    parser.add_argument("name", help="Service name")
    _add_domain_option(parser)
    parser.add_argument("--service-name", help="Service class name")
    _add_custom_file(parser, "service", "service")
    parser.set_defaults(func=_handle_generate, kind="service")
    parsers["service"] = parser

    # port
    parser = subparsers.add_parser(
        "port",
        aliases=COMMAND_ALIASES["port"],
        parents=[common],
        help="Generate a port and its adapter",
    )
    parser.add_argument("name", help="Port name")
    _add_domain_option(parser)
    _add_adapter_type(parser)
    parser.add_argument("--port-name", help="Port interface name")
    parser.add_argument("--adapter-name", help="Adapter class name")
    _add_custom_file(parser, "port", "port")
    _add_custom_file(parser, "adapter", "adapter")
    parser.set_defaults(func=_handle_generate, kind="port")
    parsers["port"] = parser

    # adapter
    parser = subparsers.add_parser(
        "adapter",
        aliases=COMMAND_ALIASES["adapter"],
        parents=[common],
        help="Generate an adapter for an existing port",
    )
    parser.add_argument("name", help="Adapter name")
    _add_domain_option(parser)
    _add_adapter_type(parser)
    parser.add_argument(
        "--port", dest="port_name", help="Port the adapter implements (default: <name>Port)"
    )
    parser.add_argument("--adapter-name", help="Adapter class name")
    _add_custom_file(parser, "adapter", "adapter")
    _add_custom_file(parser, "port", "port")
    parser.set_defaults(func=_handle_generate, kind="adapter")
    parsers["adapter"] = parser

    return parsers


def create_list_subparser(subparsers) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "list", help="List component kinds and the files they produce"
    )
    parser.set_defaults(func=_handle_list)
    return parser


def create_validate_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the validate-config subcommand."""
    parser = subparsers.add_parser(
        "validate-config",
        help=f"Check {CONFIG_FILE_NAME} for inconsistencies",
    )
    parser.add_argument(
        "--config-dir",
        "--path",
        dest="config_dir",
        metavar="DIR",
        default=".",
        help=f"Directory containing {CONFIG_FILE_NAME} (default: current directory)",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Rewrite file patterns to use the variable matching fileNameCase",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    parser.set_defaults(func=_handle_validate_config)
    return parser


# Option building


def build_options(args: argparse.Namespace) -> GenerationOptions:
    """Translate parsed arguments into generation options."""
    kind = args.kind
    custom_names = {}
    custom_paths = {}

    for flag, role in CUSTOM_FILE_FLAGS.items():
        value = getattr(args, flag, None)
        if value:
            custom_paths[role] = value

    if kind == "domain":
        for flag, role in (
            ("model_name", MODEL_FILE),
            ("service_name", SERVICE_FILE),
            ("port_name", PORT_FILE),
            ("adapter_name", ADAPTER_FILE),
        ):
            value = getattr(args, flag, None)
            if value:
                custom_names[role] = value
    elif kind == "service" and getattr(args, "service_name", None):
        custom_names[SERVICE_FILE] = args.service_name
    elif getattr(args, "adapter_name", None):
        custom_names[ADAPTER_FILE] = args.adapter_name

    return GenerationOptions(
        name=args.name,
        domain=getattr(args, "domain", None),
        adapter_type=getattr(args, "adapter_type", AdapterType.REPOSITORY.value),
        port_name=getattr(args, "port_name", None) if kind != "domain" else None,
        model=not getattr(args, "no_model", False),
        service=not getattr(args, "no_service", False),
        port=not getattr(args, "no_port", False),
        schema=getattr(args, "schema", False),
        dto=getattr(args, "dto", False),
        service_name=getattr(args, "service_name", None) if kind == "handler" else None,
        custom_names=custom_names,
        custom_paths=custom_paths,
    )


def prerequisite_warnings(
    kind: str, options: GenerationOptions, root: Path, generator
) -> List[str]:
    """Warn about a referenced domain or port that does not exist yet."""
    warnings = []
    if kind in ("domain", "handler") and not options.domain:
        return warnings

    domain = options.domain or options.name
    config = generator.config

    if kind != "domain" and options.domain and not domain_exists(root, domain, config):
        warnings.append(
            f"Domain '{to_camel_case(domain)}' does not exist yet. "
            f"Create it first with: hexforge domain {domain}"
        )

    if kind == "adapter":
        port_symbol = generator.port_name(options).symbol
        if port_symbol not in find_ports_in_domain(root, domain, config):
            warnings.append(
                f"Port '{port_symbol}' not found in domain '{to_camel_case(domain)}'. "
                f"Create it first with: hexforge port {options.name} --domain {domain}"
            )

    return warnings


# Command handlers


def _handle_generate(args: argparse.Namespace) -> int:
    """Generate one component and commit it."""
    root = Path(args.path)
    if root.exists() and not root.is_dir():
        raise CLIError(f"{root} is not a directory")

    try:
        config = load_config(base_path=args.config_dir or args.path)
        generator = get_generator(args.kind, config)
        options = build_options(args)
    except RegistryError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    _print_warnings(config.warnings, title="Configuration")

    result = generate_component(generator, options)
    if not result.success:
        console.print(f"[red]✗ Generation failed:[/red] {result.error_message}")
        return 1

    _print_warnings(
        result.warnings + prerequisite_warnings(args.kind, options, root, generator)
    )

    console.print()
    console.print(_build_preview(result.artifacts, root, args.dry_run))

    if not args.dry_run and not args.yes and sys.stdin.isatty():
        try:
            confirmed = Confirm.ask("Generate these files?", default=True)
        except (KeyboardInterrupt, EOFError):
            confirmed = False
        if not confirmed:
            console.print("[yellow]Cancelled, no files written.[/yellow]")
            return 0

    try:
        report = FileSystemCommitter(root).commit(
            result.artifacts, dry_run=args.dry_run, force=args.force
        )
    except CommitError as e:
        console.print(f"[red]✗ {e}[/red]")
        return 1

    logger.info(
        "%s '%s': %d created, %d overwritten, %d conflicts",
        args.kind,
        args.name,
        len(report.created),
        len(report.overwritten),
        len(report.conflicts),
    )
    _print_report(report)
    if args.verbose:
        _print_metadata(result)

    if not report.success:
        console.print(
            "[red]✗ Some files already exist and were not overwritten.[/red] "
            "[dim]Use --force to overwrite them.[/dim]"
        )
        return 1
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    """List component kinds with their aliases and files."""
    table = Table(
        title="📋 Component Types", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Component", style="bold green", no_wrap=True)
    table.add_column("Aliases", style="blue")
    table.add_column("Files", style="cyan")
    table.add_column("Description", style="dim")

    for kind in get_registry().list_components():
        info = get_component_info(kind)
        files = ", ".join(
            f"{role} (optional)" if role in info["optional_roles"] else role
            for role in info["roles"]
        )
        table.add_row(
            kind, ", ".join(info["aliases"]) or "-", files, info["description"]
        )

    console.print()
    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] hexforge [cyan]COMPONENT[/cyan] [dim]NAME[/dim] [options]\n"
            "[bold]Config:[/bold] hexforge validate-config [--fix]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Report configuration problems and optionally fix case variables."""
    manager = ConfigManager()
    path = manager.config_path(args.config_dir)

    user_config = manager.read_user_config(path)
    if user_config is None:
        if path.exists():
            console.print(f"[red]✗ {path} could not be read as a JSON object.[/red]")
            return 1
        console.print(
            f"[yellow]No {CONFIG_FILE_NAME} in {args.config_dir}, "
            f"the default configuration is used.[/yellow]"
        )
        return 0

    config = manager.get_config(args.config_dir)
    findings = list(config.warnings) + manager.validate_config(config)

    if args.fix:
        fixed, changes = manager.fix_case_variables(user_config, config.file_name_case)
        if changes:
            try:
                backup = manager.save_config(fixed, path, backup=True)
            except ConfigError as e:
                console.print(f"[red]✗ {e}[/red]")
                return 1

            console.print(f"[green]✓[/green] Updated {path}")
            for change in changes:
                console.print(f"  [green]•[/green] {change}")
            if backup:
                console.print(f"[dim]Backup saved to {backup}[/dim]")

            config = manager.get_config(args.config_dir)
            findings = list(config.warnings) + manager.validate_config(config)
        else:
            console.print("[dim]No file patterns needed fixing.[/dim]")

    if not findings:
        console.print(f"[green]✓ {path} is consistent[/green]")
        return 0

    table = Table(title="⚠️  Configuration Findings", box=box.SIMPLE)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Finding", style="yellow")
    for index, finding in enumerate(findings, 1):
        table.add_row(str(index), finding)
    console.print(table)

    if not args.fix:
        console.print("[dim]Run with --fix to rewrite mismatched case variables.[/dim]")
    return 1


# Output helpers


def _print_warnings(warnings: List[str], title: Optional[str] = None):
    if not warnings:
        return
    heading = f"{title} warnings" if title else "Warnings"
    console.print(f"\n[yellow]⚠️  {heading}:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {escape(warning)}", soft_wrap=True)


def _build_preview(artifacts: List[GeneratedArtifact], root: Path, dry_run: bool) -> Tree:
    """Render the files about to be written as a directory tree."""
    label = "Files that would be generated" if dry_run else "Files to generate"
    tree = Tree(f"📁 [bold]{root}[/bold] [dim]({label})[/dim]")
    nodes: Dict[str, Tree] = {}

    for artifact in artifacts:
        *directories, file_name = artifact.path.split("/")
        parent = tree
        key = ""
        for directory in directories:
            key = f"{key}/{directory}"
            if key not in nodes:
                nodes[key] = parent.add(f"📁 {directory}")
            parent = nodes[key]
        parent.add(f"📄 [cyan]{file_name}[/cyan] [dim]{artifact.symbol}[/dim]")

    return tree


def _print_report(report: CommitReport):
    title = "🧪 Dry Run" if report.dry_run else "📦 Generated Files"
    table = Table(title=title, box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Status", no_wrap=True)
    table.add_column("Path", style="cyan")

    styles = {
        CommitAction.CREATED: "[green]created[/green]",
        CommitAction.OVERWRITTEN: "[yellow]overwritten[/yellow]",
        CommitAction.CONFLICT: "[red]exists[/red]",
    }
    for entry in report.entries:
        table.add_row(styles[entry.action], entry.path)

    console.print()
    console.print(table)


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print(metadata_table)


def run_command(args: argparse.Namespace) -> int:
    """Configure logging and dispatch a parsed command."""
    setup_logging(verbose=getattr(args, "verbose", False))
    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        return 0
