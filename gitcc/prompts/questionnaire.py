"""Questionnaire - Ask for each part of a conventional commit in order."""

from dataclasses import replace
from typing import Optional

from gitcc import DEFAULT_COMMIT_TYPES, NO_SCOPE
from gitcc.commit.choices import ChoiceSet
from gitcc.commit.session import AnswerSet, SessionStore
from gitcc.prompts.base import Prompter


class Questionnaire:
    """
    Runs the commit questions, using a restored AnswerSet as defaults.

    Steps:
    1. commit type (select)
    2. scope (select when scopes are configured, otherwise free text)
    3. short description
    4. long description (multi-line)
    5. breaking change? (confirm)
    6. breaking change note (only when 5 is yes)

    When a store is given, the answers are saved after every step, so
    aborting loses at most the question being asked. PromptAborted from
    the prompter propagates to the caller.
    """

    def __init__(self, prompter: Prompter, choices: ChoiceSet, store: Optional[SessionStore] = None):
        self.prompter = prompter
        self.choices = choices
        self.store = store

    def _record(self, answers: AnswerSet, **changes) -> AnswerSet:
        answers = replace(answers, **changes)
        if self.store is not None:
            self.store.save(answers)
        return answers

    def run(self, restored: Optional[AnswerSet] = None) -> AnswerSet:
        answers = replace(restored) if restored is not None else AnswerSet()

        for step in (
            self._ask_type,
            self._ask_scope,
            self._ask_short_description,
            self._ask_long_description,
            self._ask_breaking_change,
            self._ask_breaking_change_note,
        ):
            answers = step(answers)

        return answers

    def _ask_type(self, answers: AnswerSet) -> AnswerSet:
        options = list(self.choices.commit_types)
        default = answers.commit_type if answers.commit_type in options else None
        value = self.prompter.select("Commit Type", options, default=default, hints=DEFAULT_COMMIT_TYPES)
        return self._record(answers, commit_type=value)

    def _ask_scope(self, answers: AnswerSet) -> AnswerSet:
        if self.choices.has_scope_list:
            options = list(self.choices.scopes)
            default = answers.scope if answers.scope in options else NO_SCOPE
            if default not in options:
                default = None
            value = self.prompter.select("Scope", options, default=default)
        else:
            value = self.prompter.text("Scope (optional)", default=answers.scope).strip()
        return self._record(answers, scope=value)

    def _ask_short_description(self, answers: AnswerSet) -> AnswerSet:
        value = self.prompter.text("Short Description", default=answers.short_description)
        return self._record(answers, short_description=value.strip())

    def _ask_long_description(self, answers: AnswerSet) -> AnswerSet:
        value = self.prompter.multiline("Long Description (optional)", default=answers.long_description)
        return self._record(answers, long_description=value.strip())

    def _ask_breaking_change(self, answers: AnswerSet) -> AnswerSet:
        value = self.prompter.confirm("Breaking Change", default=answers.breaking_change)
        return self._record(answers, breaking_change=value)

    def _ask_breaking_change_note(self, answers: AnswerSet) -> AnswerSet:
        # A note kept from an earlier run stays in the AnswerSet; the renderer ignores it
        if not answers.breaking_change:
            return answers
        value = self.prompter.text("Breaking Change Note", default=answers.breaking_change_note)
        return self._record(answers, breaking_change_note=value.strip())
