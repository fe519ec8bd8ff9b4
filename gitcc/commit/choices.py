"""Choice Sets - Selectable commit types and scopes."""

from dataclasses import dataclass
from typing import Iterable

from gitcc import COMMIT_TYPE_NAMES, NO_SCOPE


@dataclass(frozen=True)
class ChoiceSet:
    """Resolved options for the type and scope questions. Built once per run."""
    commit_types: tuple[str, ...] = ()
    scopes: tuple[str, ...] = ()

    @property
    def has_scope_list(self) -> bool:
        """An empty scope list means the scope is typed in freely."""
        return len(self.scopes) > 0


def dedupe(values: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence of each in order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def resolve_choices(
    use_defaults: bool = True,
    custom_commit_types: Iterable[str] = (),
    scopes: Iterable[str] = (),
) -> ChoiceSet:
    """
    Merge the built-in commit types with user-declared types and scopes.

    With defaults enabled the built-in types come first, followed by the
    custom ones, and a declared scope list is prefixed with the "none"
    sentinel. With defaults disabled only the user's values are used.
    """
    custom_commit_types = list(custom_commit_types)
    scopes = list(scopes)

    if use_defaults:
        commit_types = COMMIT_TYPE_NAMES + custom_commit_types
        if scopes:
            scopes = [NO_SCOPE] + scopes
    else:
        commit_types = custom_commit_types

    return ChoiceSet(
        commit_types=tuple(dedupe(commit_types)),
        scopes=tuple(dedupe(scopes)),
    )
