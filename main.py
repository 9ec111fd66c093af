#!/usr/bin/env python3
# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

import logging
import os
import sys

import setproctitle  # pyright: ignore

# Add current directory to path for absolute imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gio, GLib, Gtk  # noqa: E402  # pyright: ignore

from core.config import APPNAME, PASS_CONFIG, apply_cli_flags, configure_logging  # noqa: E402
from core.automation import detect_backend  # noqa: E402
from core.controller import AppContext, LauncherController  # noqa: E402
from core.exceptions import SetupError, ToolkitInitError  # noqa: E402
from core.launcher_window import PassWindow  # noqa: E402
from core.pipeline import Pipeline, SyncRunner, ThreadRunner  # noqa: E402
from core.secret_retriever import SecretRetriever  # noqa: E402
from core.store_scanner import scan_store  # noqa: E402
from utils.deps import get_missing_commands  # noqa: E402

logger = logging.getLogger("Main")


def check_utilities(focus_client):
    """Warn about external tools that are not on PATH."""
    commands = [PASS_CONFIG["pass"]["command"]] + focus_client.required_commands()
    for cmd in get_missing_commands(commands):
        logger.warning("Required command not found on PATH: %s", cmd)


def setup():
    """Everything that has to succeed before a window may be shown."""
    focus_client = detect_backend(PASS_CONFIG["automation"]["backend"])
    logger.debug("Using %s automation backend", focus_client.name)
    check_utilities(focus_client)

    # Capture before our own window exists so it is not mistaken for the target
    previous_app = focus_client.get_focused_app()
    logger.debug("Determined previous app")

    if not Gtk.init_check():
        raise ToolkitInitError("Failed to initialize GTK")
    logger.debug("Initializing GTK succeeded")

    store_config = PASS_CONFIG["store"]
    choices = scan_store(store_config["dir"], store_config["extension"])

    context = AppContext(previous_app=previous_app, choices=tuple(choices))
    pipeline = Pipeline(SecretRetriever(PASS_CONFIG["pass"]["command"]), focus_client)
    return context, pipeline


def make_runner():
    if PASS_CONFIG["pipeline"]["background"]:
        return ThreadRunner(GLib.idle_add)
    return SyncRunner()


def main():
    """Main entry point for passtype."""
    unknown = apply_cli_flags(sys.argv[1:])
    configure_logging()
    setproctitle.setproctitle(APPNAME)

    for arg in unknown:
        logger.warning("Ignoring unknown argument %s", arg)

    try:
        context, pipeline = setup()
    except SetupError as e:
        logger.error("%s", e.message)
        sys.exit(1)

    def on_activate(app: Gtk.Application):
        window = PassWindow(context.choices, application=app)
        controller = LauncherController(context, pipeline, make_runner(), window)
        window.set_controller(controller)
        window.present()

    app = Gtk.Application(
        application_id="org.passtype.PassType",
        flags=Gio.ApplicationFlags.NON_UNIQUE,
    )
    app.connect("activate", on_activate)
    return app.run(None)


if __name__ == "__main__":
    sys.exit(main())
