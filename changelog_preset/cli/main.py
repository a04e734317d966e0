"""CLI Main Entry Point"""

import json
import os
import sys

from changelog_preset.config import load_config
from changelog_preset.transform import RenderContext, RecordError, load_records
from changelog_preset.writer import ChangelogContext, PresetError, generate_context, load_preset
from changelog_preset.output import bold, dim, warning, print_error, colorize_section, highlight_links, BULLET

from changelog_preset.cli.args import parse_args
from changelog_preset.cli.commands import display_config, run_setup, run_install_completion, print_template
from changelog_preset.cli.utils import read_input, format_commit_line


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _get_render_context(args, config) -> RenderContext:
    """Resolve repository metadata from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    return RenderContext(
        host=args.host or os.environ.get('CLP_HOST') or config.host,
        owner=args.owner or os.environ.get('CLP_OWNER') or config.owner,
        repository=args.repository or os.environ.get('CLP_REPOSITORY') or config.repository,
        repo_url=args.repo_url or os.environ.get('CLP_REPO_URL') or config.repo_url,
    )


def _display_changelog(result: ChangelogContext) -> None:
    """Print each section with one line per commit, then breaking changes."""
    if not result.commit_groups:
        print(dim("No changelog entries."))
        return

    for group in result.commit_groups:
        print(f"\n### {colorize_section(group.title)}\n")
        for commit in group.commits:
            print(format_commit_line(commit))

    for group in result.note_groups:
        print(f"\n### {warning(group.title)}\n")
        for entry in group.notes:
            scope = f"{bold(f'{entry.commit.scope}:')} " if entry.commit.scope else ""
            print(f"  {dim(BULLET)} {scope}{highlight_links(entry.text)}")
    print()


def _print_verbose_stats(args, result: ChangelogContext) -> None:
    if not args.verbose:
        return
    print(dim(f"  Commits: {result.total_commits} read, {result.kept_commits} kept, "
              f"{result.omitted_commits} without a changelog section"), file=sys.stderr)


def _generate_changelog_flow(args, config, context: RenderContext, output_format: str) -> int:
    """Read commits, run them through the preset and print the result.

    Returns:
        int: Exit code
    """
    try:
        commits = load_records(read_input(args.file))
    except RecordError as e:
        print_error(str(e))
        return 1

    try:
        options = load_preset(args.templates_dir or config.templates_dir)
    except PresetError as e:
        print_error(str(e))
        return 1

    result = generate_context(commits, context, options)
    _print_verbose_stats(args, result)

    if output_format == 'json':
        payload = {
            "host": context.host,
            "owner": context.owner,
            "repository": context.repository,
            "repoUrl": context.repo_url,
            **result.to_dict(),
        }
        print(json.dumps(payload, indent=2))
    else:
        _display_changelog(result)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()

    if args.print_template:
        return print_template(args.print_template, args.templates_dir or config.templates_dir)

    context = _get_render_context(args, config)
    output_format = args.format or config.output_format
    return _generate_changelog_flow(args, config, context, output_format)
