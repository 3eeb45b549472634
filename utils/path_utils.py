# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import sys
import os
import platform
from functools import lru_cache
from pathlib import Path
from utils.constants import APP_NAME


def get_resource_path(relative_path: str) -> str:
    try:
        base_path = sys._MEIPASS
    except AttributeError:
        base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    return os.path.join(base_path, relative_path)


@lru_cache(maxsize=None)
def get_app_data_path() -> str:
    """
    Returns the root directory for application data (config).
    - Windows: C:/Users/User/AppData/Local/LexiKey
    - macOS: ~/Library/Application Support/LexiKey
    - Linux: ~/.local/share/LexiKey
    """
    override = os.environ.get('LEXIKEY_HOME')
    if override:
        base_path, app_dir = override, ""
    elif platform.system() == "Windows":
        base_path = os.environ.get('LOCALAPPDATA') or os.environ.get('APPDATA')
        app_dir = APP_NAME
    elif platform.system() == "Darwin":  # macOS
        base_path = os.path.expanduser('~/Library/Application Support')
        app_dir = APP_NAME
    else:  # Linux
        base_path = os.path.expanduser('~/.local/share')
        app_dir = APP_NAME

    app_data_path = os.path.join(base_path, app_dir) if app_dir else base_path
    os.makedirs(app_data_path, exist_ok=True)
    return app_data_path


def to_relative_posix(path, root) -> str | None:
    """Path of ``path`` below ``root`` with forward slashes, or None when outside it."""
    try:
        relative = Path(path).resolve().relative_to(Path(root).resolve())
    except ValueError:
        return None
    return relative.as_posix()
