"""Terminal Prompter - Plain input() widgets for the questionnaire."""

from typing import Callable

from gitcc.output import bold, dim, info, ARROW
from gitcc.prompts.base import Prompter, PromptAborted

# Typed alone at a text prompt, clears the restored value
CLEAR_TOKEN = '-'
# Ends a multi-line answer
END_TOKEN = '.'


class TerminalPrompter(Prompter):
    """Asks questions on stdin/stdout. Ctrl-C and EOF raise PromptAborted."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            raise PromptAborted()

    def select(self, label, options, default=None, hints=None):
        if not options:
            raise ValueError(f"No options to choose from for {label}")
        hints = hints or {}
        if default not in options:
            default = None

        print(f"\n{bold(label)}")
        width = max(len(opt) for opt in options)
        for i, opt in enumerate(options, 1):
            marker = info(ARROW) if opt == default else ' '
            hint = hints.get(opt)
            line = f"{marker} {i:>2}. {opt.ljust(width)}"
            if hint:
                line += f"  {dim(hint)}"
            print(line)

        if default is not None:
            prompt = f"Select [1-{len(options)}] (Enter for {default}): "
        else:
            prompt = f"Select [1-{len(options)}]: "

        while True:
            choice = self._ask(prompt).strip()
            if not choice and default is not None:
                return default
            if choice in options:
                return choice
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return options[int(choice) - 1]
            print(f"Enter 1-{len(options)} or one of the listed values")

    def text(self, label, default=""):
        if default:
            prompt = f"{bold(label)} {dim(f'[{default}]')}: "
        else:
            prompt = f"{bold(label)}: "
        value = self._ask(prompt).strip()
        if not value:
            return default
        if value == CLEAR_TOKEN:
            return ""
        return value

    def multiline(self, label, default=""):
        """Read lines until a lone '.'; blank lines inside are kept as paragraph breaks."""
        print(f"{bold(label)} {dim(f'(Enter to skip, {END_TOKEN!r} on its own line to finish)')}")
        if default:
            print(dim(f"Enter keeps the text below, '{CLEAR_TOKEN}' clears it:"))
            for line in default.split('\n'):
                print(dim(f"  {line}"))

        first = self._ask('> ').rstrip()
        if not first.strip():
            return default
        if first.strip() in (CLEAR_TOKEN, END_TOKEN):
            return ""

        lines = [first]
        while True:
            line = self._ask('. ').rstrip()
            if line.strip() == END_TOKEN:
                break
            lines.append(line)
        return '\n'.join(lines)

    def confirm(self, label, default=False):
        choices = 'Y/n' if default else 'y/N'
        while True:
            answer = self._ask(f"{bold(label)} [{choices}]: ").strip().lower()
            if not answer:
                return default
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False
            print("Enter y or n")
