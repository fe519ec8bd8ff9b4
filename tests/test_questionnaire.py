"""
Tests for the questionnaire and the terminal prompter.

Run with:
    pytest tests/test_questionnaire.py -v
"""

import pytest

from gitcc import NO_SCOPE
from gitcc.commit import AnswerSet, SessionStore, render_message, resolve_choices
from gitcc.prompts import Prompter, PromptAborted, Questionnaire, TerminalPrompter


class ScriptedPrompter(Prompter):
    """Answers prompts from a list and records what was asked."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.calls = []

    def _next(self, kind, label, default):
        self.calls.append((kind, label, default))
        if not self._answers:
            raise PromptAborted()
        answer = self._answers.pop(0)
        if answer is KEEP:
            return default
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def select(self, label, options, default=None, hints=None):
        self.options = list(options)
        return self._next('select', label, default)

    def text(self, label, default=""):
        return self._next('text', label, default)

    def multiline(self, label, default=""):
        return self._next('multiline', label, default)

    def confirm(self, label, default=False):
        return self._next('confirm', label, default)


# Answer that accepts whatever default is offered
KEEP = object()


@pytest.fixture
def free_scope_choices():
    return resolve_choices()


@pytest.fixture
def listed_scope_choices():
    return resolve_choices(True, [], ["api", "cli"])


# ---------------------------------------------------------------------------
# Questionnaire — step order and branching
# ---------------------------------------------------------------------------

class TestQuestionnaireSteps:

    def test_full_run_with_free_text_scope(self, free_scope_choices):
        prompter = ScriptedPrompter(["feat", "api", "add health endpoint", "", False])
        answers = Questionnaire(prompter, free_scope_choices).run()

        assert answers == AnswerSet(
            commit_type="feat",
            scope="api",
            short_description="add health endpoint",
        )
        assert [kind for kind, _, _ in prompter.calls] == ['select', 'text', 'text', 'multiline', 'confirm']
        assert render_message(answers) == "feat(api): add health endpoint"

    def test_scope_select_when_scopes_configured(self, listed_scope_choices):
        prompter = ScriptedPrompter(["fix", "cli", "quote args", "", False])
        answers = Questionnaire(prompter, listed_scope_choices).run()

        kind, label, default = prompter.calls[1]
        assert kind == 'select'
        assert label == "Scope"
        assert default == NO_SCOPE
        assert answers.scope == "cli"

    def test_scope_select_without_sentinel_has_no_default(self):
        choices = resolve_choices(False, ["feat"], ["api", "db"])
        prompter = ScriptedPrompter(["feat", "db", "x", "", False])
        Questionnaire(prompter, choices).run()
        assert prompter.calls[1] == ('select', "Scope", None)

    def test_breaking_note_asked_only_when_breaking(self, free_scope_choices):
        prompter = ScriptedPrompter(["refactor", "", "drop legacy client", "", True, "removes v1 client API"])
        answers = Questionnaire(prompter, free_scope_choices).run()

        assert prompter.calls[-1] == ('text', "Breaking Change Note", "")
        assert render_message(answers) == (
            "refactor!: drop legacy client\n\nBREAKING CHANGE: removes v1 client API"
        )

    def test_no_note_question_when_not_breaking(self, free_scope_choices):
        prompter = ScriptedPrompter(["docs", "", "fix typo", "", False])
        Questionnaire(prompter, free_scope_choices).run()
        assert all(label != "Breaking Change Note" for _, label, _ in prompter.calls)

    def test_answers_are_trimmed(self, free_scope_choices):
        prompter = ScriptedPrompter([
            "fix", "  core  ", "  handle empty input \t", "\n\n  Body line.\n\n  Second.  \n\n", True, "  note  ",
        ])
        answers = Questionnaire(prompter, free_scope_choices).run()
        assert answers.scope == "core"
        assert answers.short_description == "handle empty input"
        assert answers.long_description == "Body line.\n\n  Second."
        assert answers.breaking_change_note == "note"

    def test_type_options_come_from_choices(self):
        choices = resolve_choices(True, ["perf"], [])
        prompter = ScriptedPrompter(["perf", "", "speed up", "", False])
        Questionnaire(prompter, choices).run()
        assert prompter.options == list(choices.commit_types)


# ---------------------------------------------------------------------------
# Questionnaire — restored defaults
# ---------------------------------------------------------------------------

class TestQuestionnaireRestore:

    @pytest.fixture
    def restored(self):
        return AnswerSet(
            commit_type="fix",
            scope="api",
            short_description="old subject",
            long_description="old body",
            breaking_change=True,
            breaking_change_note="old note",
        )

    def test_restored_values_are_offered_as_defaults(self, listed_scope_choices, restored):
        prompter = ScriptedPrompter([KEEP] * 6)
        answers = Questionnaire(prompter, listed_scope_choices).run(restored)

        assert [default for _, _, default in prompter.calls] == [
            "fix", "api", "old subject", "old body", True, "old note",
        ]
        assert answers == restored

    def test_restored_type_no_longer_offered_has_no_default(self, restored):
        choices = resolve_choices(False, ["feat", "chore"], [])
        prompter = ScriptedPrompter(["feat", KEEP, KEEP, KEEP, False])
        Questionnaire(prompter, choices).run(restored)
        assert prompter.calls[0] == ('select', "Commit Type", None)

    def test_restored_scope_no_longer_offered_falls_back_to_none(self, restored):
        choices = resolve_choices(True, [], ["cli"])
        prompter = ScriptedPrompter(["fix", KEEP, KEEP, KEEP, False])
        Questionnaire(prompter, choices).run(restored)
        assert prompter.calls[1] == ('select', "Scope", NO_SCOPE)

    def test_turning_breaking_off_keeps_note_but_hides_it(self, free_scope_choices, restored):
        prompter = ScriptedPrompter([KEEP, KEEP, KEEP, KEEP, False])
        answers = Questionnaire(prompter, free_scope_choices).run(restored)

        assert answers.breaking_change is False
        assert answers.breaking_change_note == "old note"
        assert "old note" not in render_message(answers)

    def test_restored_answers_not_mutated(self, free_scope_choices, restored):
        snapshot = AnswerSet(**restored.to_dict())
        prompter = ScriptedPrompter(["feat", "x", "new", "", False])
        Questionnaire(prompter, free_scope_choices).run(restored)
        assert restored == snapshot


# ---------------------------------------------------------------------------
# Questionnaire — persistence
# ---------------------------------------------------------------------------

class TestQuestionnairePersistence:

    @pytest.fixture
    def store(self, tmp_path):
        return SessionStore(tmp_path)

    def test_final_answers_saved(self, free_scope_choices, store):
        prompter = ScriptedPrompter(["feat", "api", "add endpoint", "body", True, "note"])
        answers = Questionnaire(prompter, free_scope_choices, store).run()
        assert store.load() == answers

    def test_abort_keeps_completed_steps(self, free_scope_choices, store):
        prompter = ScriptedPrompter(["feat", "api", "add endpoint", PromptAborted()])
        with pytest.raises(PromptAborted):
            Questionnaire(prompter, free_scope_choices, store).run()

        assert store.load() == AnswerSet(commit_type="feat", scope="api", short_description="add endpoint")

    def test_resume_after_abort(self, free_scope_choices, store):
        first = ScriptedPrompter(["fix", "", "handle nulls", KeyboardInterrupt()])
        with pytest.raises(KeyboardInterrupt):
            Questionnaire(first, free_scope_choices, store).run()

        second = ScriptedPrompter([KEEP, KEEP, KEEP, "Details.", False])
        answers = Questionnaire(second, free_scope_choices, store).run(store.load())
        assert render_message(answers) == "fix: handle nulls\n\nDetails."

    def test_save_failure_does_not_stop_questions(self, tmp_path, free_scope_choices, capsys):
        store = SessionStore(tmp_path / "gone")
        prompter = ScriptedPrompter(["feat", "", "add flag", "", False])
        answers = Questionnaire(prompter, free_scope_choices, store).run()
        assert answers.short_description == "add flag"
        assert "Could not save session" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# TerminalPrompter
# ---------------------------------------------------------------------------

def make_input(*responses):
    """Return an input() replacement that replays responses in order."""
    queue = list(responses)

    def _input(prompt=""):
        if not queue:
            raise EOFError()
        value = queue.pop(0)
        if isinstance(value, BaseException):
            raise value
        return value
    return _input


class TestTerminalSelect:

    OPTIONS = ["feat", "fix", "docs"]

    def test_select_by_number(self):
        prompter = TerminalPrompter(make_input("2"))
        assert prompter.select("Type", self.OPTIONS) == "fix"

    def test_select_by_value(self):
        prompter = TerminalPrompter(make_input("docs"))
        assert prompter.select("Type", self.OPTIONS) == "docs"

    def test_enter_takes_default(self):
        prompter = TerminalPrompter(make_input(""))
        assert prompter.select("Type", self.OPTIONS, default="fix") == "fix"

    def test_enter_without_default_asks_again(self, capsys):
        prompter = TerminalPrompter(make_input("", "9", "1"))
        assert prompter.select("Type", self.OPTIONS) == "feat"
        assert capsys.readouterr().out.count("Enter 1-3") == 2

    def test_unknown_default_is_ignored(self):
        prompter = TerminalPrompter(make_input("", "3"))
        assert prompter.select("Type", self.OPTIONS, default="Commit Type") == "docs"

    def test_hints_are_shown(self, capsys):
        prompter = TerminalPrompter(make_input("1"))
        prompter.select("Type", self.OPTIONS, hints={"feat": "A new feature"})
        assert "A new feature" in capsys.readouterr().out

    def test_no_options_is_an_error(self):
        with pytest.raises(ValueError):
            TerminalPrompter(make_input()).select("Type", [])


class TestTerminalText:

    def test_returns_typed_value(self):
        assert TerminalPrompter(make_input("  hello ")).text("Subject") == "hello"

    def test_enter_keeps_default(self):
        assert TerminalPrompter(make_input("")).text("Subject", default="old") == "old"

    def test_dash_clears_default(self):
        assert TerminalPrompter(make_input("-")).text("Subject", default="old") == ""


class TestTerminalMultiline:

    def test_reads_until_dot(self):
        prompter = TerminalPrompter(make_input("first", "", "third", "."))
        assert prompter.multiline("Body") == "first\n\nthird"

    def test_enter_keeps_default(self):
        prompter = TerminalPrompter(make_input(""))
        assert prompter.multiline("Body", default="old\nbody") == "old\nbody"

    @pytest.mark.parametrize("first", ["-", "."])
    def test_clear_or_finish_on_first_line(self, first):
        prompter = TerminalPrompter(make_input(first))
        assert prompter.multiline("Body", default="old") == ""


class TestTerminalConfirm:

    @pytest.mark.parametrize("response, default, expected", [
        ("y", False, True),
        ("YES", False, True),
        ("n", True, False),
        ("no", True, False),
        ("", True, True),
        ("", False, False),
    ])
    def test_answers(self, response, default, expected):
        assert TerminalPrompter(make_input(response)).confirm("Breaking", default=default) is expected

    def test_invalid_answer_asks_again(self):
        assert TerminalPrompter(make_input("maybe", "y")).confirm("Breaking") is True


class TestTerminalAbort:

    @pytest.mark.parametrize("exc", [KeyboardInterrupt(), EOFError()])
    def test_interrupt_becomes_prompt_aborted(self, exc):
        prompter = TerminalPrompter(make_input(exc))
        with pytest.raises(PromptAborted):
            prompter.text("Subject")

    def test_abort_mid_multiline(self):
        prompter = TerminalPrompter(make_input("line", KeyboardInterrupt()))
        with pytest.raises(PromptAborted):
            prompter.multiline("Body")
