# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""
Focus and keystroke automation.

Every backend can ask which window currently has focus, bring a previously
captured window back to the front and type text into it. The actual work is
done by the window manager's IPC or by external tools.
"""

import json
import logging
import os
import subprocess
import sys
from typing import List

from typing_extensions import final

import i3ipc

from .exceptions import (
    AutomationExitError,
    AutomationLaunchError,
    PreviousAppError,
    SetupError,
)

logger = logging.getLogger("Automation")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace").strip()


def run_tool(cmd: List[str]) -> subprocess.CompletedProcess:
    """Run an automation tool, raising on launch failure or non-zero exit.

    Output is returned stripped and decoded leniently, so a tool printing
    invalid UTF-8 cannot raise anything but the two automation errors.
    """
    tool = cmd[0]
    try:
        raw = subprocess.run(cmd, capture_output=True)
    except OSError as e:
        raise AutomationLaunchError(f"Could not launch {tool}: {e}") from e

    stdout = _decode(raw.stdout)
    stderr = _decode(raw.stderr)
    if raw.returncode != 0:
        logger.debug("%s exited with status %d", tool, raw.returncode)
        raise AutomationExitError(
            f"{tool} was not successful (exit status {raw.returncode})",
            stdout=stdout,
            stderr=stderr,
        )
    return subprocess.CompletedProcess(cmd, raw.returncode, stdout, stderr)


def applescript_string(value: str) -> str:
    """Quote ``value`` as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class FocusClient:
    """Interface shared by all backends."""

    name = "base"

    def get_focused_app(self) -> str:
        raise NotImplementedError()

    def focus_app(self, app: str) -> None:
        raise NotImplementedError()

    def type_text(self, text: str) -> None:
        raise NotImplementedError()

    def required_commands(self) -> List[str]:
        return []

    def _capture(self, cmd: List[str]) -> str:
        """Run a capture command, turning every failure into PreviousAppError."""
        try:
            result = run_tool(cmd)
        except (AutomationLaunchError, AutomationExitError) as e:
            raise PreviousAppError(
                f"Unable to determine the focused application: {e.message}"
            ) from e
        return result.stdout.strip()


class WtypeMixin:
    def type_text(self, text: str) -> None:
        logger.debug("Auto-typing text of length %d", len(text))
        run_tool(["wtype", "--", text])


@final
class SwayFocusClient(WtypeMixin, FocusClient):
    """Sway/i3 through i3ipc; windows are identified by container id."""

    name = "sway"

    def _connect(self):
        try:
            return i3ipc.Connection()
        except Exception as e:
            raise AutomationLaunchError(f"Could not connect to sway IPC: {e}") from e

    def get_focused_app(self) -> str:
        try:
            tree = self._connect().get_tree()
        except AutomationLaunchError as e:
            raise PreviousAppError(e.message) from e
        except Exception as e:
            raise PreviousAppError(f"Could not query the sway tree: {e}") from e
        focused = tree.find_focused()
        if focused is None:
            raise PreviousAppError("sway reported no focused window")
        return str(focused.id)

    def focus_app(self, app: str) -> None:
        logger.debug("Focusing previous window")
        connection = self._connect()
        try:
            replies = connection.command(f"[con_id={app}] focus")
        except Exception as e:
            raise AutomationLaunchError(f"Lost connection to sway IPC: {e}") from e
        failed = [reply for reply in replies if not reply.success]
        if not replies or failed:
            error = failed[0].error if failed else "empty reply"
            raise AutomationExitError(f"sway could not focus the window: {error}")

    def required_commands(self) -> List[str]:
        return ["wtype"]


@final
class HyprlandFocusClient(WtypeMixin, FocusClient):
    """Hyprland through hyprctl; windows are identified by address."""

    name = "hyprland"

    def get_focused_app(self) -> str:
        output = self._capture(["hyprctl", "activewindow", "-j"])
        try:
            address = json.loads(output).get("address", "")
        except (ValueError, AttributeError) as e:
            raise PreviousAppError(f"Unexpected reply from hyprctl: {e}") from e
        if not address:
            raise PreviousAppError("hyprctl reported no active window")
        return address

    def focus_app(self, app: str) -> None:
        logger.debug("Focusing previous window")
        result = run_tool(["hyprctl", "dispatch", "focuswindow", f"address:{app}"])
        # hyprctl exits 0 even when the dispatcher fails
        if result.stdout.strip() not in ("ok", ""):
            raise AutomationExitError(
                "hyprctl could not focus the window",
                stdout=result.stdout.strip(),
                stderr=result.stderr.strip(),
            )

    def required_commands(self) -> List[str]:
        return ["hyprctl", "wtype"]


@final
class X11FocusClient(FocusClient):
    """X11 through xdotool; windows are identified by window id."""

    name = "x11"

    def get_focused_app(self) -> str:
        window = self._capture(["xdotool", "getactivewindow"])
        if not window:
            raise PreviousAppError("xdotool reported no active window")
        return window

    def focus_app(self, app: str) -> None:
        logger.debug("Focusing previous window")
        run_tool(["xdotool", "windowactivate", "--sync", app])

    def type_text(self, text: str) -> None:
        logger.debug("Auto-typing text of length %d", len(text))
        run_tool(["xdotool", "type", "--clearmodifiers", "--", text])

    def required_commands(self) -> List[str]:
        return ["xdotool"]


@final
class MacFocusClient(FocusClient):
    """macOS through osascript and cliclick; apps are identified by name."""

    name = "macos"

    def get_focused_app(self) -> str:
        app = self._capture(
            [
                "osascript",
                "-e",
                'tell application "System Events" to set frontmostApplicationName '
                "to name of 1st process whose frontmost is true",
            ]
        )
        if not app:
            raise PreviousAppError("osascript reported no frontmost application")
        return app

    def focus_app(self, app: str) -> None:
        logger.debug("Focusing previous app")
        run_tool(
            ["osascript", "-e", f"tell application {applescript_string(app)} to activate"]
        )

    def type_text(self, text: str) -> None:
        logger.debug("Auto-typing text of length %d", len(text))
        run_tool(["cliclick", f"t:{text}"])

    def required_commands(self) -> List[str]:
        return ["osascript", "cliclick"]


BACKENDS = {
    SwayFocusClient.name: SwayFocusClient,
    HyprlandFocusClient.name: HyprlandFocusClient,
    X11FocusClient.name: X11FocusClient,
    MacFocusClient.name: MacFocusClient,
}


def detect_backend(preferred: str = "auto") -> FocusClient:
    if preferred and preferred != "auto":
        if preferred not in BACKENDS:
            raise SetupError(
                f"Unknown automation backend {preferred!r}, "
                f"expected one of {', '.join(BACKENDS)}"
            )
        return BACKENDS[preferred]()

    if os.environ.get("SWAYSOCK") or os.environ.get("I3SOCK"):
        return SwayFocusClient()
    if os.environ.get("HYPRLAND_INSTANCE_SIGNATURE"):
        return HyprlandFocusClient()
    if sys.platform == "darwin":
        return MacFocusClient()
    return X11FocusClient()
