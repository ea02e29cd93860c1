"""Nail-file open actions used by the main window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from pinlocator.core.errors import ParseError
from pinlocator.core.models import Dataset
from pinlocator.core.parser import ACCEPTED_EXTENSIONS
from pinlocator.navigation.navigator import Navigator
from pinlocator.ui.i18n import t

_LOGGER = logging.getLogger(__name__)


class MainWindowFileHost(Protocol):
    """Subset of MainWindow API required for loading files."""

    _navigator: Navigator

    def _after_load(self, dataset: Dataset) -> None: ...

    def _set_status(self, text: str) -> None: ...


def open_nail_file(
    host: MainWindowFileHost, file_path: Path, *, message_box_cls: type[Any]
) -> bool:
    """Load *file_path* into the host's navigator.

    On failure the previous dataset stays loaded and a warning is shown.
    """
    try:
        dataset = host._navigator.load_file(file_path)
    except (ParseError, OSError) as exc:
        _LOGGER.warning("Failed to load %s: %s", file_path, exc)
        host._set_status(t().status_load_failed.format(name=file_path.name))
        message_box_cls.warning(
            host,
            t().open_title,
            t().open_failed.format(name=file_path.name, exc=exc),
        )
        return False

    host._after_load(dataset)
    host._set_status(
        t().status_loaded.format(name=file_path.name, count=len(dataset))
    )
    return True


def on_open_file(
    host: MainWindowFileHost,
    *,
    file_dialog_cls: type[Any],
    message_box_cls: type[Any],
) -> None:
    patterns = " ".join(f"*{ext}" for ext in ACCEPTED_EXTENSIONS)
    file_path, _ = file_dialog_cls.getOpenFileName(
        host,
        t().open_title,
        "",
        f"{t().nail_filter} ({patterns});;{t().all_files}",
    )
    if not file_path:
        return
    open_nail_file(host, Path(file_path), message_box_cls=message_box_cls)
