"""Interactive Prompts Package"""

from gitcc.prompts.base import Prompter, PromptAborted
from gitcc.prompts.terminal import TerminalPrompter
from gitcc.prompts.questionnaire import Questionnaire

__all__ = [
    "Prompter",
    "PromptAborted",
    "TerminalPrompter",
    "Questionnaire",
]
