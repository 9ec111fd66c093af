# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""Lookups for the external tools passtype shells out to."""

import shutil
from typing import Iterable, List


def check_command_exists(command: str) -> bool:
    return shutil.which(command) is not None


def get_missing_commands(commands: Iterable[str]) -> List[str]:
    """Names from ``commands`` that are not on PATH, in the order given."""
    return [cmd for cmd in commands if not check_command_exists(cmd)]
