"""Commit Composition Package"""

from gitcc.commit.choices import ChoiceSet, dedupe, resolve_choices
from gitcc.commit.session import AnswerSet, SessionStore, FORMAT_VERSION
from gitcc.commit.message import render_header, render_message, BREAKING_CHANGE_PREFIX

__all__ = [
    "ChoiceSet",
    "dedupe",
    "resolve_choices",
    "AnswerSet",
    "SessionStore",
    "FORMAT_VERSION",
    "render_header",
    "render_message",
    "BREAKING_CHANGE_PREFIX",
]
