"""
git-cc

Interactive Conventional Commits composer for staged git changes.
"""

__version__ = "1.0.0"

# Built-in commit types, in the order they are offered
# Used by: commit/choices.py (resolver), prompts/questionnaire.py (hints)
DEFAULT_COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'build': 'Build system or external dependency changes',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'ci': 'CI/CD configuration changes',
    'docs': 'Documentation only changes',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
}

COMMIT_TYPE_NAMES = list(DEFAULT_COMMIT_TYPES.keys())

# Scope value meaning "no scope annotation"
NO_SCOPE = 'none'

# Repository-relative file names
CONFIG_FILENAME = '.git-cc.yaml'
SESSION_FILENAME = '.git-cc.swp'
