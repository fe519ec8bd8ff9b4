"""CLI Main Entry Point"""

import sys

from gitcc.commit import SessionStore, render_message
from gitcc.config import ConfigManager
from gitcc.git import GitAnalyzer, GitError, RepoStatus
from gitcc.output import dim, print_debug, print_error, print_success, print_warning, set_debug
from gitcc.prompts import PromptAborted, Questionnaire, TerminalPrompter

from gitcc.cli.args import parse_args
from gitcc.cli.commands import display_config, run_discard, run_install_completion
from gitcc.cli.utils import display_message

# Exit codes, kept distinct for scripts wrapping git-cc
EXIT_OK = 0
EXIT_NOT_A_REPO = 1
EXIT_NOTHING_STAGED = 2
EXIT_COMMIT_FAILED = 3
EXIT_NO_COMMIT_TYPES = 4
EXIT_ABORTED = 130


def _resolve_repository(analyzer):
    """Check we are in a repository with staged changes.

    Returns:
        tuple: (root, exit_code) - root is None when the caller should exit with exit_code
    """
    try:
        root = analyzer.root
        status = analyzer.status()
    except GitError as e:
        print_error(str(e))
        return None, EXIT_NOT_A_REPO

    if status is RepoStatus.UNTRACKED_ONLY:
        print_error('nothing added to commit but untracked files present (use "git add" to track)')
        return None, EXIT_NOTHING_STAGED
    if not status.can_commit:
        print_error("nothing added to commit")
        return None, EXIT_NOTHING_STAGED

    return root, EXIT_OK


def _handle_subcommands(args, analyzer):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config or args.discard:
        try:
            root = analyzer.root
        except GitError as e:
            print_error(str(e))
            return EXIT_NOT_A_REPO, True
        if args.discard:
            return run_discard(root), True
        return display_config(root), True
    return EXIT_OK, False


def _compose_message(args, root, prompter):
    """Run the questionnaire and render the message.

    Returns:
        tuple: (message, store, exit_code) - message is None when the caller should exit with exit_code
    """
    config = ConfigManager(root).load()
    choices = config.resolve_choices()
    print_debug(f"Commit types: {', '.join(choices.commit_types)}")
    print_debug(f"Scopes: {', '.join(choices.scopes) or '(free text)'}")

    if not choices.commit_types:
        print_error("No commit types configured (use_defaults is off and custom_commit_types is empty)")
        return None, None, EXIT_NO_COMMIT_TYPES

    store = SessionStore(root)
    if args.fresh:
        restored = None
    else:
        restored = store.load()
        if not restored.is_empty:
            print_warning(f"Restored previous session from {store.path.name}")

    try:
        answers = Questionnaire(prompter, choices, store).run(restored)
    except PromptAborted:
        print(dim(f"Cancelled. Answers so far are kept in {store.path.name}."))
        return None, store, EXIT_ABORTED

    return render_message(answers), store, EXIT_OK


def main(argv=None, prompter=None, analyzer=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    if args.verbose:
        set_debug(True)

    analyzer = analyzer or GitAnalyzer()

    exit_code, should_exit = _handle_subcommands(args, analyzer)
    if should_exit:
        return exit_code

    root, exit_code = _resolve_repository(analyzer)
    if root is None:
        return exit_code

    message, store, exit_code = _compose_message(args, root, prompter or TerminalPrompter())
    if message is None:
        return exit_code

    if args.dry_run:
        print(message)
        return EXIT_OK

    display_message(message)
    print_debug(message)

    try:
        returncode = analyzer.commit(message)
    except GitError as e:
        print_error(str(e))
        return EXIT_COMMIT_FAILED
    except KeyboardInterrupt:
        print()
        print(dim(f"Cancelled. Answers are kept in {store.path.name}."))
        return EXIT_ABORTED
    if returncode != 0:
        print_error(f"git commit failed (exit status {returncode}). Answers are kept for the next run.")
        return EXIT_COMMIT_FAILED

    store.clear()
    print_success("Committed")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
