"""CLI entry point for cloudcrafter-skills.

Provides commands for installing, updating, listing and removing the
bundled skills, agents and workflows in a project's .agent/ directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cloudcrafter_skills import __version__
from cloudcrafter_skills.cli import output
from cloudcrafter_skills.core.config import SyncConfig
from cloudcrafter_skills.core.frontmatter import read_description
from cloudcrafter_skills.core.resolver import load_manifest
from cloudcrafter_skills.core.sync import SyncEngine
from cloudcrafter_skills.core.types import DOC_SUFFIX, ContentKind

PROG = "cloudcrafter-skills"

DEFAULT_TITLE = "Salesforce Agent Kit"

KIND_LABELS = {
    ContentKind.SKILLS: "skill categories",
    ContentKind.AGENTS: "agents",
    ContentKind.WORKFLOWS: "workflows",
}

KIND_TITLES = {
    ContentKind.SKILLS: "Skill Categories",
    ContentKind.AGENTS: "Specialized Agents",
    ContentKind.WORKFLOWS: "Workflows",
}

KIND_ICONS = {
    ContentKind.SKILLS: "📁",
    ContentKind.AGENTS: "🤖",
    ContentKind.WORKFLOWS: "🔁",
}


def _add_dir_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dir", "-d",
        type=str,
        dest="subdir",
        default=None,
        help="Project directory (default: current directory)",
    )


def _add_kind_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--kind", "-k",
        choices=[kind.value for kind in ContentKind],
        default=ContentKind.SKILLS.value,
        help="Kind of content (default: skills)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="AI agent skills for Salesforce development - copy skills, agents and workflows into .agent/.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Install everything into ./.agent
  {PROG} init

  # Reinstall everything, overwriting local copies
  {PROG} init --force

  # Add a single skill category
  {PROG} add apex

  # Add a single agent
  {PROG} add apex-code-reviewer --kind agents

  # Show available and installed content with descriptions
  {PROG} list --verbose

  # Refresh installed content from this package
  {PROG} update

  # Remove a skill category
  {PROG} remove apex

Environment Variables:
  CLOUDCRAFTER_PROJECT_DIR: Project directory (default: current directory)
  CLOUDCRAFTER_SKILLS_SOURCE: Bundled content root (default: auto-detected)
        """,
    )

    # Global options
    parser.add_argument(
        "--dir", "-d",
        type=str,
        default=None,
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Bundled content root to copy from (default: auto-detected)",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every copy, skip and remove decision",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Init command
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize .agent/ with all skills, agents and workflows",
        description="Copy every bundled skill category, agent and workflow into the project.",
    )
    init_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing content",
    )
    _add_dir_option(init_parser)

    # Add command
    add_parser = subparsers.add_parser(
        "add",
        help="Add a skill category (e.g. apex, lwc, triggers), agent or workflow",
        description="Copy one bundled skill category, agent or workflow into the project.",
    )
    add_parser.add_argument(
        "name",
        help="Category name for skills, item name for agents and workflows",
    )
    _add_kind_option(add_parser)
    add_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing content",
    )
    _add_dir_option(add_parser)

    # List command
    list_parser = subparsers.add_parser(
        "list",
        help="Show available and installed content",
        description="List bundled skill categories, agents and workflows and mark the installed ones.",
    )
    list_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show individual skills and descriptions",
    )
    _add_dir_option(list_parser)

    # Update command
    update_parser = subparsers.add_parser(
        "update",
        help="Update installed content to the version in this package",
        description="Overwrite installed skill categories, agents and workflows with the bundled copies.",
    )
    _add_dir_option(update_parser)

    # Remove command
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove a skill category, agent or workflow",
        description="Delete an installed skill category, agent or workflow from the project.",
    )
    remove_parser.add_argument(
        "name",
        help="Category name for skills, item name for agents and workflows",
    )
    _add_kind_option(remove_parser)
    _add_dir_option(remove_parser)

    return parser


def _get_project_dir(args: argparse.Namespace) -> str | None:
    """Get project directory from args, preferring subcommand option over global."""
    if getattr(args, "subdir", None):
        return args.subdir
    return args.dir


def _configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        logging.disable(logging.CRITICAL)
        logging.getLogger().handlers = []
    elif args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _build_engine(args: argparse.Namespace) -> SyncEngine:
    config = SyncConfig.from_env(
        project_dir=_get_project_dir(args),
        source_dir=args.source,
    )
    return SyncEngine.from_config(config)


def _display_name(kind: ContentKind, name: str) -> str:
    if kind.categorized:
        return f'Category "{name}"'
    return f'{kind.singular.capitalize()} "{name}"'


def _print_names(title: str, names: list[str]) -> None:
    output.blank()
    output.info(title)
    for name in names:
        output.line(f"  - {name}")


def cmd_init(args: argparse.Namespace) -> int:
    """Handle the init command."""
    output.header(f"Initializing {DEFAULT_TITLE}")
    engine = _build_engine(args)

    if not engine.source.has_content():
        output.error("No skills, agents or workflows found in package")
        return 1

    skill_counts = {c.name: len(c.skills) for c in engine.source.categories()}
    reports = engine.copy_everything(force=args.force)

    for kind, report in reports.items():
        label = KIND_LABELS[kind]
        total = len(report.copied) + len(report.skipped)
        output.blank()
        output.info(f"Found {total} {label}")

        if report.copied:
            output.success(f"Installed {len(report.copied)} {label}:")
            for name in report.copied:
                if kind.categorized:
                    output.category(name, skill_counts.get(name, 0))
                else:
                    output.bullet(name, KIND_ICONS[kind])

        if report.skipped:
            output.warning(
                f"Skipped {len(report.skipped)} existing {label} (use --force to overwrite):"
            )
            for name in report.skipped:
                output.bullet(name)

    output.blank()
    for kind in reports:
        output.success(f"{kind.value.capitalize()} installed to: {engine.target.kind_root(kind)}")
    output.info("Your AI assistant can now use these skills for Salesforce development!")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Handle the add command."""
    kind = ContentKind(args.kind)
    output.header(f"Adding {args.name}")
    engine = _build_engine(args)

    if kind.categorized:
        found = engine.source.find_category(args.name)
    else:
        found = engine.source.find_item(kind, args.name)

    if found is None:
        output.error(f"{_display_name(kind, args.name)} not found")
        _print_names(f"Available {kind.value}:", engine.source.names(kind))
        return 1

    if not engine.install(kind, args.name, force=args.force).copied:
        output.warning(
            f"{_display_name(kind, args.name)} already exists (use --force to overwrite)"
        )
        return 0

    if kind.categorized:
        output.success(
            f"Installed {args.name} category with {len(found.skills)} skills:"
        )
        for skill in found.skills:
            output.item(skill)
    else:
        output.success(f"Installed {kind.singular} {args.name}")

    output.blank()
    output.info(f"Installed to: {engine.target_path(kind, args.name)}")
    return 0


def _list_skills(engine: SyncEngine, verbose: bool) -> None:
    available = engine.source.categories()
    installed = engine.target.categories()
    installed_names = {c.name for c in installed}

    output.line(f"{KIND_TITLES[ContentKind.SKILLS]}:")
    output.blank()
    for category in available:
        output.category(
            category.name,
            len(category.skills),
            installed=category.name in installed_names,
        )
        if verbose:
            for skill in category.skills:
                doc = Path(category.path) / f"{skill}{DOC_SUFFIX}"
                output.item(skill, read_description(doc))

    total_skills = engine.source.count_items(ContentKind.SKILLS)
    installed_skills = engine.target.count_items(ContentKind.SKILLS)
    output.blank()
    output.line(
        f"  Skills: {len(available)} categories, {total_skills} skills "
        f"({installed_skills} installed)"
    )


def _list_flat(engine: SyncEngine, kind: ContentKind, verbose: bool) -> None:
    available = engine.source.items(kind)
    if not available:
        return
    installed_names = set(engine.target.names(kind))

    output.blank()
    output.line(f"{KIND_TITLES[kind]}:")
    output.blank()
    for entry in available:
        mark = " ✓" if entry.name in installed_names else ""
        output.line(f"  {KIND_ICONS[kind]} {entry.name}{mark}")
        if verbose:
            description = read_description(entry.path)
            if description:
                output.item(description)

    output.blank()
    output.line(
        f"  {kind.value.capitalize()}: {len(available)} available "
        f"({len(installed_names)} installed)"
    )


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the list command."""
    engine = _build_engine(args)
    manifest = load_manifest(engine.source_root)
    title = DEFAULT_TITLE
    if manifest is not None:
        title = f"{manifest.name} v{manifest.version}"
    output.header(title)

    _list_skills(engine, args.verbose)
    _list_flat(engine, ContentKind.AGENTS, args.verbose)
    _list_flat(engine, ContentKind.WORKFLOWS, args.verbose)

    output.blank()
    if not args.verbose:
        output.info("Use --verbose to see individual skills")
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    """Handle the update command."""
    output.header(f"Updating {DEFAULT_TITLE}")
    engine = _build_engine(args)

    if not engine.has_installed():
        output.warning("No skills installed yet")
        output.info(f'Run "{PROG} init" to install skills first')
        return 0

    installed_counts = {c.name: len(c.skills) for c in engine.target.categories()}
    reports = engine.update_everything()
    updated_any = False

    for kind, report in reports.items():
        label = KIND_LABELS[kind]
        if report.copied:
            updated_any = True
            output.success(f"Updated {len(report.copied)} {label}:")
            for name in report.copied:
                if kind.categorized:
                    output.bullet(f"{name} ({installed_counts.get(name, 0)} skills)")
                else:
                    output.bullet(name)
        if report.orphaned:
            output.warning(
                f"{len(report.orphaned)} installed {label} not in this package (left unchanged):"
            )
            for name in report.orphaned:
                output.bullet(name)

    if not updated_any:
        output.info("All skills are already up to date")
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    """Handle the remove command."""
    kind = ContentKind(args.kind)
    output.header(f"Removing {args.name}")
    engine = _build_engine(args)

    if kind.categorized:
        found = engine.target.find_category(args.name)
    else:
        found = engine.target.find_item(kind, args.name)

    if found is None:
        output.error(f"{_display_name(kind, args.name)} is not installed")
        installed = engine.target.names(kind)
        if installed:
            _print_names(f"Installed {kind.value}:", installed)
        return 1

    if not engine.remove(kind, args.name):
        output.error(f"Failed to remove {args.name}")
        return 1

    if kind.categorized:
        output.success(f"Removed {args.name} category ({len(found.skills)} skills)")
    else:
        output.success(f"Removed {kind.singular} {args.name}")
    return 0


COMMANDS = {
    "init": cmd_init,
    "add": cmd_add,
    "list": cmd_list,
    "update": cmd_update,
    "remove": cmd_remove,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # If no command specified, print help
    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
