"""CLI Commands"""

import os
import sys
from pathlib import Path

from gitcc import CONFIG_FILENAME, NO_SCOPE
from gitcc.commit.session import SessionStore
from gitcc.config import ConfigManager, ENV_USE_DEFAULTS
from gitcc.output import bold, dim, info, print_success


def display_config(root: Path) -> int:
    """Display current configuration and the resolved choices."""
    manager = ConfigManager(root)
    config = manager.load()
    config_path = manager.get_config_path()
    choices = config.resolve_choices()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {CONFIG_FILENAME} found)")

    env_use_defaults = os.environ.get(ENV_USE_DEFAULTS)
    if env_use_defaults is not None:
        print(f"  {dim('Environment overrides:')}")
        print(f"    {ENV_USE_DEFAULTS}={env_use_defaults}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    use_defaults:        {info(str(config.use_defaults).lower())}")
    print(f"    custom_commit_types: {info(', '.join(config.custom_commit_types) or '-')}")
    print(f"    scopes:              {info(', '.join(config.scopes) or '-')}")

    print()
    print(f"  {bold('Choices:')}")
    print(f"    commit types: {info(', '.join(choices.commit_types) or '-')}")
    if choices.has_scope_list:
        print(f"    scopes:       {info(', '.join(choices.scopes))}")
    else:
        print(f"    scopes:       {dim('free text')}")

    store = SessionStore(root)
    if store.exists():
        print(f"\n  {dim('Saved session:')} {store.path}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {CONFIG_FILENAME} (in repository root)")
    print(f"    Global: ~/{CONFIG_FILENAME}")
    print(f"\n  {dim(f'Use {NO_SCOPE!r} as a scope to leave it out of the message')}\n")

    return 0


def run_discard(root: Path) -> int:
    """Delete the saved session."""
    store = SessionStore(root)
    if not store.exists():
        print(dim("No saved session."))
        return 0
    store.clear()
    print_success(f"Removed {store.path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell:
        rc_file = os.path.expanduser('~/.zshrc')
        line = 'eval "$(register-python-argcomplete git-cc)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.zshrc')}")
    elif 'bash' in shell:
        rc_file = os.path.expanduser('~/.bashrc')
        line = 'eval "$(register-python-argcomplete git-cc)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.bashrc')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell git-cc | Out-String | Invoke-Expression\n")
        print("To make it permanent, add to your $PROFILE")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete git-cc)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish git-cc | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
