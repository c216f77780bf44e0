"""Data file location."""

import os
from pathlib import Path

from pennybook.config import DEFAULT_DATA_FILE, get_setting

DATA_FILE_ENV = "PENNYBOOK_FILE"


def get_data_path(override: str | Path | None = None, config_path: Path | None = None) -> Path:
    """Get the ledger file path.

    Resolution order: explicit override, PENNYBOOK_FILE environment variable,
    ``data_file`` from the config file, then ``data.csv`` in the current
    directory.

    Args:
        override: Path given on the command line, if any.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path to the ledger file.
    """
    if override:
        return Path(override).expanduser()

    env_path = os.environ.get(DATA_FILE_ENV)
    if env_path:
        return Path(env_path).expanduser()

    configured = get_setting("data_file", None, config_path)
    if configured:
        return Path(str(configured)).expanduser()

    return Path(DEFAULT_DATA_FILE)

