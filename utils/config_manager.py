# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json
import os
from utils.constants import CONFIG_FILE_NAME, DEFAULT_DOMAIN, DEFAULT_EXCLUDED_DIRS
from utils.path_utils import get_app_data_path
import logging
logger = logging.getLogger(__name__)


def get_config_path():
    return os.path.join(get_app_data_path(), CONFIG_FILE_NAME)


def load_config(config_path=None):
    config_path = config_path or get_config_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        config_data = {}
    if not isinstance(config_data, dict):
        logger.warning(f"Ignoring malformed config file: {config_path}")
        config_data = {}

    # General settings
    config_data.setdefault("language", "")
    config_data.setdefault("default_domain", DEFAULT_DOMAIN)
    config_data.setdefault("last_domain", "")
    config_data.setdefault("navigate_to_file", True)

    # Project scanning
    if "excluded_dirs" not in config_data:
        config_data["excluded_dirs"] = list(DEFAULT_EXCLUDED_DIRS)

    # Window state
    config_data.setdefault("window_geometry", "")

    return config_data


def save_config(config, config_path=None):
    config_path = config_path or get_config_path()
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
    except Exception as e:
        logger.error(f"Error saving config file: {e}")
