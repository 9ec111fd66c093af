# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportMissingImports=false
# ruff: ignore

import logging
from typing import Iterable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

logger = logging.getLogger("ChoiceModel")

TEXT_COLUMN = 0


def choices_to_model(choices: Iterable[str]) -> Gtk.ListStore:
    """Build the single string column model used by Gtk.EntryCompletion."""
    model = Gtk.ListStore(str)
    for name in choices:
        model.append([name])
    logger.debug("Converted %d choices to Gtk ListStore", len(model))
    return model
