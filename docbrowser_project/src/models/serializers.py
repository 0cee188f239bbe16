#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reading and writing browser option files.

An option file ("sidecar") is a JSON object stored next to a PDF as
``<stem>.browser.json`` and may hold any subset of the
:class:`~docbrowser_project.src.models.browser_options.BrowserOptions` keys.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .browser_options import DEFAULT_OPTIONS, BrowserOptions

logger = logging.getLogger(__name__)

SIDECAR_SUFFIX = ".browser.json"


class OptionsLoadError(Exception):
    """Raised when an option file cannot be read or validated."""
    pass


def sidecar_path(pdf_path: str | Path) -> Path:
    """Return the option file path that belongs to *pdf_path*."""
    pdf_path = Path(pdf_path)
    return pdf_path.with_name(pdf_path.stem + SIDECAR_SUFFIX)


def options_from_dict(data: Mapping[str, Any], base: BrowserOptions = DEFAULT_OPTIONS) -> BrowserOptions:
    """
    Apply *data* on top of *base* and validate the result.

    Raises:
        OptionsLoadError: If *data* is not a mapping or fails validation.
    """
    if not isinstance(data, Mapping):
        raise OptionsLoadError(f"Options must be a JSON object, got {type(data).__name__}.")
    try:
        return base.merged(data)
    except ValidationError as e:
        logger.error(f"Invalid browser options: {e}")
        raise OptionsLoadError(f"Invalid browser options: {e}") from e


def load_options_file(filepath: str | Path, base: BrowserOptions = DEFAULT_OPTIONS) -> BrowserOptions:
    """
    Load an option file and merge it over *base*.

    Args:
        filepath: Path to the JSON option file.
        base: Options the file's keys are applied on top of.

    Returns:
        BrowserOptions: The validated, merged options.

    Raises:
        OptionsLoadError: If the file is missing, is not valid JSON or holds
            invalid values.
    """
    path = Path(filepath)
    logger.info(f"Loading browser options from {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)
    except FileNotFoundError:
        logger.error(f"Options file not found: {path}")
        raise OptionsLoadError(f"Options file not found: {path}")
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from {path}: {e}")
        raise OptionsLoadError(f"Invalid JSON in {path}: {e}") from e
    return options_from_dict(data, base)


def save_options_file(options: BrowserOptions, filepath: str | Path) -> None:
    """Write *options* as JSON, creating parent directories as needed."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fp:
        json.dump(options.to_dict(), fp, indent=2)
    logger.info(f"Browser options saved to {path}")


def options_for_pdf(
    pdf_path: str | Path,
    base: BrowserOptions = DEFAULT_OPTIONS,
    outline: Optional[list] = None,
) -> BrowserOptions:
    """
    Resolve the options used when opening *pdf_path*.

    The sidecar file (if any) is applied over *base*.  When neither the base
    nor the sidecar provide a table of contents, *outline* (the PDF's own
    bookmarks) is used instead.  A broken sidecar is logged and skipped so
    the document still opens.
    """
    options = base
    sidecar = sidecar_path(pdf_path)
    if sidecar.is_file():
        try:
            options = load_options_file(sidecar, base)
        except OptionsLoadError as e:
            logger.warning(f"Ignoring option file {sidecar}: {e}")

    if not options.toc and outline:
        options = options.merged(toc=outline)
    return options
