# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

APP_NAME = "LexiKey"
APP_VERSION = "0.3.0"
CONFIG_FILE_NAME = "config.json"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Ranking
PRIMARY_BUNDLE_WEIGHT = 2
SOURCE_ROOT_WEIGHT = 1
SOURCE_ROOT_PREFIXES = ("src", "app")

# Translation catalogues
TRANSLATIONS_DIR_NAME = "translations"
BUNDLE_CLASS_SUFFIX = "Bundle.php"
DEFAULT_DOMAIN = "messages"

YAML_EXTENSIONS = (".yml", ".yaml")
XLIFF_EXTENSIONS = (".xlf", ".xliff")
PO_EXTENSIONS = (".po",)
JSON_EXTENSIONS = (".json",)
# Everything a catalogue can be stored as; only YAML and XLIFF are write targets.
CATALOGUE_EXTENSIONS = YAML_EXTENSIONS + XLIFF_EXTENSIONS + PO_EXTENSIONS + JSON_EXTENSIONS + (
    ".php", ".ini", ".csv", ".qt", ".res", ".mo",
)

XLIFF_NS_1_2 = "urn:oasis:names:tc:xliff:document:1.2"
XLIFF_NS_2_0 = "urn:oasis:names:tc:xliff:document:2.0"

DEFAULT_EXCLUDED_DIRS = [
    ".git", ".idea", ".svn", "node_modules", "vendor", "var", "cache",
]

KEY_SLUG_MAX_LENGTH = 40

# Table columns
ICON_COLUMN_WIDTH = 32
NAME_COLUMN_WIDTH = 190
CREATE_COLUMN_WIDTH = 50
