"""
Session Module

Keeps questionnaire answers on disk between runs so an aborted prompt
or a failed commit can be resumed.

The swap file lives at the repository root (.git-cc.swp) and holds a
JSON object with one key per AnswerSet field plus a format version:

{
    "version": 1,
    "commit_type": "feat",
    "scope": "api",
    ...
}
"""

import json
import os
import tempfile
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from gitcc import SESSION_FILENAME
from gitcc.output import print_debug, print_warning

FORMAT_VERSION = 1


@dataclass
class AnswerSet:
    """Answers collected by the questionnaire. Every field may be empty."""
    commit_type: str = ""
    scope: str = ""
    short_description: str = ""
    long_description: str = ""
    breaking_change: bool = False
    breaking_change_note: str = ""

    @property
    def is_empty(self) -> bool:
        return self == AnswerSet()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'AnswerSet':
        """Create an AnswerSet from a dictionary, ignoring unknown keys.

        Raises TypeError when a known key holds a value of the wrong type.
        """
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = bool if f.type in (bool, 'bool') else str
            if not isinstance(value, expected):
                raise TypeError(f"{f.name} should be {expected.__name__}, got {type(value).__name__}")
            values[f.name] = value
        return cls(**values)


class SessionStore:
    """
    Reads and writes the swap file.

    load() never fails: a missing or damaged file just means there is
    nothing to restore. save() and clear() report problems as warnings
    and carry on.
    """

    def __init__(self, root: Path, filename: str = SESSION_FILENAME):
        self._path = Path(root) / filename

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> tuple[Optional[AnswerSet], Optional[str]]:
        """Read the swap file. Returns (answers, error_reason)."""
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return None, "no saved session"
        except (OSError, UnicodeDecodeError) as e:
            return None, f"could not read {self._path}: {e}"
        except (ValueError, RecursionError) as e:
            return None, f"{self._path} is not valid JSON: {e}"

        if not isinstance(data, dict):
            return None, f"{self._path} does not hold a JSON object"

        version = data.get('version', FORMAT_VERSION)
        if isinstance(version, bool) or not isinstance(version, int) or not 1 <= version <= FORMAT_VERSION:
            return None, f"unsupported session format version: {version!r}"

        try:
            return AnswerSet.from_dict(data), None
        except TypeError as e:
            return None, f"{self._path} has invalid field: {e}"

    def load(self) -> AnswerSet:
        """Return the saved answers, or an empty AnswerSet if there are none."""
        answers, reason = self.read()
        if answers is None:
            print_debug(f"Starting fresh session: {reason}")
            return AnswerSet()
        print_debug(f"Loaded session from {self._path}")
        return answers

    def save(self, answers: AnswerSet) -> bool:
        """Replace the swap file with the given answers.

        The new content is written to a temporary file next to the swap
        file and moved over it, so a reader never sees a partial write.
        """
        payload = {'version': FORMAT_VERSION, **answers.to_dict()}
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=self._path.name + '.',
                suffix='.tmp',
                dir=self._path.parent,
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
            return True
        except OSError as e:
            print_warning(f"Could not save session to {self._path}: {e}")
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as e:
                    print_debug(f"Could not delete temp file {tmp_name}: {e}")

    def clear(self) -> None:
        """Delete the swap file. Missing file is fine."""
        try:
            self._path.unlink()
            print_debug(f"Removed {self._path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            print_warning(f"Could not remove {self._path}: {e}")
