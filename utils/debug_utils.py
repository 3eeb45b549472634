# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import os
import sys
import logging
from utils.constants import LOG_FORMAT

IS_DEBUG_MODE = False


def setup_debug_mode():
    global IS_DEBUG_MODE
    debug_env_var = os.getenv('DEBUG', '0').lower()
    if debug_env_var in ('1', 'true', 'on', 'yes'):
        IS_DEBUG_MODE = True
        print("--- DEBUG MODE IS ON ---")
    return IS_DEBUG_MODE


def configure_logging():
    log_level = logging.DEBUG if IS_DEBUG_MODE else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
