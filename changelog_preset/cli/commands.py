"""CLI Commands"""

import os
import sys

from changelog_preset.config import Config, load_config, save_config, get_config_path
from changelog_preset.output import bold, dim, info, print_success, print_error
from changelog_preset.writer import PresetError, WriterOptions, load_preset
from changelog_preset.cli.utils import TEMPLATE_OPTIONS

ENV_VARS = ['CLP_HOST', 'CLP_OWNER', 'CLP_REPOSITORY', 'CLP_REPO_URL']


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .clprc found)")

    overrides = [(name, os.environ.get(name)) for name in ENV_VARS if os.environ.get(name)]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides:
            print(f"    {name}={value}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    host:          {info(config.host or 'none')}")
    print(f"    owner:         {info(config.owner or 'none')}")
    print(f"    repository:    {info(config.repository or 'none')}")
    print(f"    repo_url:      {info(config.repo_url or 'none')}")
    print(f"    output_format: {info(config.output_format)}")
    print(f"    templates_dir: {info(config.templates_dir or 'built-in')}")

    print(f"\n  {dim('Config locations:')}")
    print("    Local:  .clprc (in current directory)")
    print("    Global: ~/.clprc")
    print(f"\n  {dim('Run')} clp --setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    defaults = Config()
    host = input(f"Host URL (Enter for {defaults.host}): ").strip() or defaults.host

    print("\nLink issues through host/owner/repository, or through a full repository URL?\n")
    print("  1. host/owner/repository (default)")
    print("  2. repository URL\n")

    owner = repository = repo_url = None
    while True:
        choice = input("Select [1/2] (Enter for default): ").strip()
        if choice in ('', '1'):
            owner = input("Owner: ").strip() or None
            repository = input("Repository: ").strip() or None
            break
        elif choice == '2':
            repo_url = input("Repository URL: ").strip() or None
            break

    print("\nOutput format:\n")
    print("  1. text - colored summary of each section (default)")
    print("  2. json - grouped commits for a template renderer\n")

    output_format = "text"
    while True:
        choice = input("Select [1/2] (Enter for default): ").strip()
        if choice in ('', '1'):
            output_format = 'text'
            break
        elif choice == '2':
            output_format = 'json'
            break

    config = Config(
        host=host,
        owner=owner,
        repository=repository,
        repo_url=repo_url,
        output_format=output_format,
    )
    for message in config.validate():
        print(f"Config warning: {message}", file=sys.stderr)
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


REGISTER = 'register-python-argcomplete'

# shell -> (rc file, line to add)
COMPLETION_LINES = {
    'zsh': ('~/.zshrc', f'eval "$({REGISTER} clp)"'),
    'bash': ('~/.bashrc', f'eval "$({REGISTER} clp)"'),
    'fish': ('~/.config/fish/config.fish', f'{REGISTER} --shell fish clp | source'),
    'powershell': ('$PROFILE', f'{REGISTER} --shell powershell clp | Out-String | Invoke-Expression'),
}


def _detect_shell() -> str | None:
    shell = os.path.basename(os.environ.get('SHELL', ''))
    if shell in COMPLETION_LINES:
        return shell
    return 'powershell' if sys.platform == 'win32' else None


def run_install_completion() -> int:
    """Show how to enable shell tab completion for clp."""
    print(f"\n{bold('Tab Completion Setup')}\n")

    shell = _detect_shell()
    if shell:
        rc_file, line = COMPLETION_LINES[shell]
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
    else:
        print("Add the line for your shell to its startup file:\n")
        for name, (rc_file, line) in COMPLETION_LINES.items():
            print(f"  {dim(f'# {name} ({rc_file})')}")
            print(f"  {line}\n")

    print(dim('Open a new shell, then press TAB to autocomplete flags.'))
    return 0


def print_template(name: str, templates_dir: str | None) -> int:
    """Print one of the preset's template fragments as-is."""
    try:
        options: WriterOptions = load_preset(templates_dir)
    except PresetError as e:
        print_error(str(e))
        return 1
    print(getattr(options, TEMPLATE_OPTIONS[name]), end='')
    return 0
