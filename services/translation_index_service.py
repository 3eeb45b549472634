# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json
import os
import xml.etree.ElementTree as ET
from pathlib import Path
import polib
import yaml
from services.bundle_service import BundleService
from utils.constants import (
    TRANSLATIONS_DIR_NAME, CATALOGUE_EXTENSIONS, YAML_EXTENSIONS, XLIFF_EXTENSIONS,
    PO_EXTENSIONS, JSON_EXTENSIONS, DEFAULT_EXCLUDED_DIRS
)
from utils.path_utils import to_relative_posix
import logging
logger = logging.getLogger(__name__)

ICU_DOMAIN_SUFFIX = "+intl-icu"


def local_name(tag):
    return tag.rsplit('}', 1)[-1] if isinstance(tag, str) else ""


def parse_catalogue_name(file_name):
    """
    Splits ``<domain>.<locale>.<ext>`` into its parts.

    :return: ``(domain, locale, ext)`` or None when the name does not follow the convention.
    """
    parts = file_name.split('.')
    if len(parts) < 3:
        return None
    ext = '.' + parts[-1].lower()
    if ext not in CATALOGUE_EXTENSIONS:
        return None
    locale_code = parts[-2]
    domain = '.'.join(parts[:-2])
    if domain.endswith(ICU_DOMAIN_SUFFIX):
        domain = domain[:-len(ICU_DOMAIN_SUFFIX)]
    if not domain or not locale_code:
        return None
    return domain, locale_code, ext


def flatten_keys(data, prefix="", include_groups=False):
    """
    Dotted paths of the leaves of a nested mapping.

    With ``include_groups`` the paths of non-empty inner mappings are
    returned as well; such a path is taken even though it holds no message.
    """
    keys = set()
    if isinstance(data, dict):
        for key, value in data.items():
            full_key = f"{prefix}.{key}" if prefix else str(key)
            if isinstance(value, dict) and value:
                if include_groups:
                    keys.add(full_key)
                keys.update(flatten_keys(value, full_key, include_groups))
            else:
                keys.add(full_key)
    return keys


def read_xliff_version(path):
    """Returns the ``version`` of an XLIFF root element, or None if the file is not XLIFF."""
    try:
        with open(path, 'rb') as f:
            for _event, element in ET.iterparse(f, events=('start',)):
                if local_name(element.tag) != 'xliff':
                    return None
                return element.get('version', '')
    except (ET.ParseError, OSError) as e:
        logger.debug(f"Not a readable XLIFF document {path}: {e}")
    return None


def is_supported_xliff_version(version):
    return version is not None and (version == '1.2' or version.startswith('2.'))


def _read_yaml_keys(path):
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return flatten_keys(data, include_groups=True) if isinstance(data, dict) else set()


def _read_json_keys(path):
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return flatten_keys(data, include_groups=True) if isinstance(data, dict) else set()


def _read_po_keys(path):
    po = polib.pofile(str(path))
    return {entry.msgid for entry in po if entry.msgid and not entry.obsolete}


def read_xliff_keys(path):
    root = ET.parse(path).getroot()
    keys = set()
    version = root.get('version', '')
    if version.startswith('2.'):
        for unit in root.iter():
            if local_name(unit.tag) != 'unit':
                continue
            key = unit.get('name')
            if not key:
                for child in unit.iter():
                    if local_name(child.tag) == 'source' and child.text:
                        key = child.text
                        break
            key = key or unit.get('id')
            if key:
                keys.add(key)
    else:
        for unit in root.iter():
            if local_name(unit.tag) != 'trans-unit':
                continue
            key = unit.get('resname')
            if not key:
                for child in unit:
                    if local_name(child.tag) == 'source' and child.text:
                        key = child.text
                        break
            key = key or unit.get('id')
            if key:
                keys.add(key)
    return keys


_KEY_READERS = {}
_KEY_READERS.update({ext: _read_yaml_keys for ext in YAML_EXTENSIONS})
_KEY_READERS.update({ext: read_xliff_keys for ext in XLIFF_EXTENSIONS})
_KEY_READERS.update({ext: _read_po_keys for ext in PO_EXTENSIONS})
_KEY_READERS.update({ext: _read_json_keys for ext in JSON_EXTENSIONS})


class TranslationIndex:
    """
    Filesystem index of the translation catalogues of one project.

    Catalogues live directly in directories named ``translations`` and are
    named ``<domain>.<locale>.<ext>``. The index answers which files belong
    to a domain and whether a key is already defined anywhere.
    """

    def __init__(self, project_root, excluded_dirs=None, bundle_service=None):
        self.project_root = Path(project_root).resolve()
        self.excluded_dirs = set(DEFAULT_EXCLUDED_DIRS if excluded_dirs is None else excluded_dirs)
        self.bundle_service = bundle_service or BundleService(self.project_root)
        self._domain_files = {}
        self._key_cache = {}
        self.refresh()

    def refresh(self):
        domain_files = {}
        for dirpath, dirnames, filenames in os.walk(self.project_root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.excluded_dirs)
            if os.path.basename(dirpath) != TRANSLATIONS_DIR_NAME:
                continue
            for file_name in sorted(filenames):
                parsed = parse_catalogue_name(file_name)
                if parsed is None:
                    continue
                domain = parsed[0]
                domain_files.setdefault(domain, []).append(Path(dirpath) / file_name)

        self._domain_files = domain_files
        self.bundle_service.clear_cache()
        total = sum(len(files) for files in domain_files.values())
        logger.info(f"Indexed {total} translation files in {len(domain_files)} domains under {self.project_root}")

    def get_domains(self):
        return sorted(self._domain_files)

    def resolve_domain_files(self, domain):
        return list(self._domain_files.get(domain, []))

    def iter_files(self):
        for domain in self.get_domains():
            yield from self._domain_files[domain]

    def is_supported_resource_format(self, path) -> bool:
        ext = Path(path).suffix.lower()
        if ext in YAML_EXTENSIONS:
            return True
        if ext in XLIFF_EXTENSIONS:
            return is_supported_xliff_version(read_xliff_version(path))
        return False

    def containing_bundle(self, path):
        return self.bundle_service.get_containing_bundle(path)

    def relative_path(self, path):
        return to_relative_posix(path, self.project_root)

    def get_keys(self, path):
        path = Path(path)
        reader = _KEY_READERS.get(path.suffix.lower())
        if reader is None:
            return frozenset()
        try:
            mtime = path.stat().st_mtime_ns
        except OSError as e:
            logger.warning(f"Cannot stat translation file {path}: {e}")
            return frozenset()

        cached = self._key_cache.get(path)
        if cached is not None and cached[0] == mtime:
            return cached[1]

        try:
            keys = frozenset(reader(path))
        except (yaml.YAMLError, ET.ParseError, json.JSONDecodeError, OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Failed to read keys from {path}: {e}")
            keys = frozenset()
        self._key_cache[path] = (mtime, keys)
        return keys

    def has_translation_key(self, key) -> bool:
        if not key or not key.strip():
            return False
        for path in self.iter_files():
            if key in self.get_keys(path):
                return True
        return False
