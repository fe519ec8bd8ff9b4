"""Message Renderer - Turn a finished AnswerSet into commit message text."""

from gitcc import NO_SCOPE
from gitcc.commit.session import AnswerSet

BREAKING_CHANGE_PREFIX = "BREAKING CHANGE: "


def render_header(answers: AnswerSet) -> str:
    """First line: type[(scope)][!]: short description"""
    header = answers.commit_type
    if answers.scope and answers.scope != NO_SCOPE:
        header += f"({answers.scope})"
    if answers.breaking_change:
        header += "!"
    return f"{header}: {answers.short_description}"


def render_message(answers: AnswerSet) -> str:
    """
    Render the full commit message.

    Body and breaking-change footer are each separated by one blank line
    and only appear when they have content. A note left over from an
    earlier session is never rendered unless breaking_change is set.
    """
    blocks = [render_header(answers)]

    if answers.long_description:
        blocks.append(answers.long_description)

    if answers.breaking_change and answers.breaking_change_note:
        blocks.append(BREAKING_CHANGE_PREFIX + answers.breaking_change_note)

    return "\n\n".join(blocks)
