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

APPNAME = "passtype"

# Paths
STORE_DIR = os.path.expanduser(
    os.environ.get("PASSWORD_STORE_DIR", "~/.password-store")
)

PASS_CONFIG = {
    # Password store layout
    "store": {
        "dir": STORE_DIR,
        "extension": ".gpg",
    },
    # External decryption tool, invoked as `<command> show <entry>`
    "pass": {
        "command": "pass",
    },
    # Focus and typing backend: "auto", "sway", "hyprland", "x11" or "macos"
    "automation": {
        "backend": os.environ.get("PASSTYPE_BACKEND", "auto"),
    },
    # Display and Window Settings
    "window": {
        "title": APPNAME,
        "width": 300,
        "height": 10,
        "modal": True,
        "always_on_top": True,
        "resizable": False,
        "placeholder_text": "Search password store...",
    },
    # Entry completion
    "completion": {
        "inline_completion": True,
        "popup_completion": True,
        "popup_single_match": True,
        "fuzzy": True,
        "fuzzy_threshold": 75,  # RapidFuzz partial_ratio cutoff, 0-100
    },
    # Run decrypt/refocus/type on a worker thread so the window keeps repainting
    "pipeline": {
        "background": True,
    },
    "logging": {
        "level": os.environ.get("PASSTYPE_LOG_LEVEL", "INFO"),
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
}


def apply_cli_flags(argv):
    """Apply the few supported command line flags to PASS_CONFIG.

    --debug       log at DEBUG level
    --foreground  run the pipeline on the UI thread

    Returns the arguments that were not recognised.
    """
    rest = []
    for arg in argv:
        if arg == "--debug":
            PASS_CONFIG["logging"]["level"] = "DEBUG"
        elif arg == "--foreground":
            PASS_CONFIG["pipeline"]["background"] = False
        else:
            rest.append(arg)
    return rest


def configure_logging(level=None):
    """Send log records to stderr. Secrets never reach any logger."""
    level_name = (level or PASS_CONFIG["logging"]["level"]).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format=PASS_CONFIG["logging"]["format"],
        stream=sys.stderr,
    )
    return numeric
