# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""Secret retrieval through the external `pass` command."""

import logging
import subprocess

from typing_extensions import final

from .exceptions import (
    PassDecodeError,
    PassEmptyOutputError,
    PassExitError,
    PassLaunchError,
)

logger = logging.getLogger("SecretRetriever")


def _describe(data: bytes) -> str:
    return data.decode("utf-8", errors="replace").strip()


@final
class SecretRetriever:
    """Runs ``<command> show <entry>`` and returns the first line of output."""

    def __init__(self, command: str = "pass"):
        self.command = command

    def get_password(self, entry: str) -> str:
        logger.debug("Requesting password from %s", self.command)
        try:
            result = subprocess.run(
                [self.command, "show", entry],
                capture_output=True,
            )
        except OSError as e:
            raise PassLaunchError(f"Unable to call {self.command}: {e}") from e

        if result.returncode != 0:
            stdout = _describe(result.stdout)
            stderr = _describe(result.stderr)
            logger.debug("%s exited with status %d", self.command, result.returncode)
            raise PassExitError(
                f"{self.command} indicated an error:\n\n"
                f"stdout:\n{stdout}\n\nstderr:\n{stderr}",
                returncode=result.returncode,
                stdout=stdout,
                stderr=stderr,
            )

        try:
            out = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PassDecodeError(
                f"Unable to decode reply from {self.command}: {e}"
            ) from e

        lines = out.splitlines()
        if not out.strip() or not lines[0]:
            raise PassEmptyOutputError(
                f"{self.command} output did not contain a password line"
            )

        password = lines[0]
        logger.debug("Received password of length %d", len(password))
        return password
