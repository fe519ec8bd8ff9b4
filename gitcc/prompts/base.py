"""Prompter Base Classes"""

from abc import ABC, abstractmethod
from typing import Optional


class PromptAborted(Exception):
    """Raised when the user cancels a prompt (Ctrl-C or end of input)."""
    pass


class Prompter(ABC):
    """Abstract source of answers for the questionnaire."""

    @abstractmethod
    def select(
        self,
        label: str,
        options: list[str],
        default: Optional[str] = None,
        hints: Optional[dict[str, str]] = None,
    ) -> str:
        """Pick one of options. default is None when nothing is preselected."""
        pass

    @abstractmethod
    def text(self, label: str, default: str = "") -> str:
        pass

    @abstractmethod
    def multiline(self, label: str, default: str = "") -> str:
        pass

    @abstractmethod
    def confirm(self, label: str, default: bool = False) -> bool:
        pass
