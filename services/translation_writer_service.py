# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import base64
import hashlib
import xml.etree.ElementTree as ET
from pathlib import Path
import yaml
from services.translation_index_service import flatten_keys, local_name, read_xliff_keys
from utils.constants import YAML_EXTENSIONS, XLIFF_EXTENSIONS
from utils.localization import _
import logging
logger = logging.getLogger(__name__)


class TranslationWriteError(Exception):
    def __init__(self, path, reason):
        self.path = Path(path)
        self.reason = reason
        self.written = []
        super().__init__(_("Failed to write key to {file}: {reason}").format(file=self.path.name, reason=reason))


def make_unit_id(key):
    digest = hashlib.sha256(key.encode('utf-8')).digest()
    return base64.b64encode(digest).decode('ascii')[:7].translate(str.maketrans('/+', '._'))


def _note_lines(note):
    return [line.strip() for line in (note or "").splitlines() if line.strip()]


def _flow_document_header(text):
    """Leading comment lines of a document whose mapping is written in flow style, else None."""
    header = []
    for line in text.splitlines(keepends=True):
        stripped = line.strip()
        if not stripped or stripped.startswith('#') or stripped == '---':
            header.append(line)
            continue
        return "".join(header) if stripped.startswith('{') else None
    return None


def _load_yaml_catalogue(path, key):
    """
    Reads a YAML catalogue and checks that ``key`` can be added to it.

    :return: ``(text, data, present)`` where ``present`` tells that the key already holds a message.
    """
    path = Path(path)
    text = path.read_text(encoding='utf-8') if path.exists() else ""
    try:
        data = yaml.safe_load(text) if text.strip() else None
    except yaml.YAMLError as e:
        raise TranslationWriteError(path, str(e)) from e

    if data is not None and not isinstance(data, dict):
        raise TranslationWriteError(path, _("top level is not a mapping"))

    messages = flatten_keys(data or {})
    if key in messages:
        return text, data, True
    # a group such as 'app' in 'app: {greeting: ...}' would be clobbered by a second 'app:'
    if key in flatten_keys(data or {}, include_groups=True) or any(m.startswith(key + '.') for m in messages):
        raise TranslationWriteError(path, _("'{key}' is a group of existing keys").format(key=key))
    return text, data, False


def add_key_to_yaml(path, key, value, note=""):
    """Appends ``key: value`` to a YAML catalogue, keeping the existing text as is."""
    path = Path(path)
    text, data, present = _load_yaml_catalogue(path, key)
    if present:
        logger.info(f"Key '{key}' already present in {path}, skipped")
        return False

    comment = "".join(f"# {line}\n" for line in _note_lines(note))

    header = _flow_document_header(text)
    if header is not None:
        # block lines cannot follow a flow mapping; dump the merged mapping in flow style
        merged = dict(data or {})
        merged[key] = value
        new_text = header + comment + yaml.safe_dump(
            merged, allow_unicode=True, default_flow_style=True, sort_keys=False, width=float('inf')
        )
    else:
        entry = yaml.safe_dump({key: value}, allow_unicode=True, default_flow_style=False, width=float('inf'))
        if text and not text.endswith('\n'):
            new_text = text + '\n' + comment + entry
        else:
            new_text = text + comment + entry

    path.write_text(new_text, encoding='utf-8')
    return True


def _qualified(tag, namespace):
    return f"{{{namespace}}}{tag}" if namespace else tag


def _find_first(root, name):
    for element in root.iter():
        if local_name(element.tag) == name:
            return element
    return None


def _load_xliff_catalogue(path):
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    tree = ET.parse(path, parser=parser)
    root = tree.getroot()
    container_name = 'file' if root.get('version', '').startswith('2.') else 'body'
    container = _find_first(root, container_name)
    if container is None:
        raise TranslationWriteError(path, _("no <{element}> element").format(element=container_name))
    return tree, container


def add_key_to_xliff(path, key, value, note=""):
    path = Path(path)
    if key in read_xliff_keys(path):
        logger.info(f"Key '{key}' already present in {path}, skipped")
        return False

    tree, container = _load_xliff_catalogue(path)
    root = tree.getroot()
    namespace = root.tag[1:].split('}', 1)[0] if root.tag.startswith('{') else ""
    if namespace:
        ET.register_namespace('', namespace)
    unit_id = make_unit_id(key)
    lines = _note_lines(note)

    if root.get('version', '').startswith('2.'):
        unit = ET.SubElement(container, _qualified('unit', namespace), {'id': unit_id, 'name': key})
        if lines:
            notes = ET.SubElement(unit, _qualified('notes', namespace))
            ET.SubElement(notes, _qualified('note', namespace)).text = " ".join(lines)
        segment = ET.SubElement(unit, _qualified('segment', namespace))
        ET.SubElement(segment, _qualified('source', namespace)).text = key
        ET.SubElement(segment, _qualified('target', namespace)).text = value
    else:
        unit = ET.SubElement(container, _qualified('trans-unit', namespace), {'id': unit_id, 'resname': key})
        ET.SubElement(unit, _qualified('source', namespace)).text = key
        ET.SubElement(unit, _qualified('target', namespace)).text = value
        if lines:
            ET.SubElement(unit, _qualified('note', namespace)).text = " ".join(lines)

    ET.indent(tree, space="    ")
    tree.write(path, encoding='utf-8', xml_declaration=True)
    return True


class TranslationWriter:
    """
    Writes an accepted key into the selected catalogues.

    Every target is read and checked before the first one is modified, so a
    malformed or conflicting file leaves all of them untouched.
    """

    def _run(self, path, action):
        try:
            return action()
        except TranslationWriteError:
            raise
        except (OSError, ET.ParseError, UnicodeDecodeError) as e:
            logger.error(f"Translation file {path} failed: {e}", exc_info=True)
            raise TranslationWriteError(path, str(e)) from e

    def check(self, path, key):
        ext = Path(path).suffix.lower()
        if ext in YAML_EXTENSIONS:
            self._run(path, lambda: _load_yaml_catalogue(path, key))
        elif ext in XLIFF_EXTENSIONS:
            self._run(path, lambda: _load_xliff_catalogue(path))
        else:
            raise TranslationWriteError(path, _("unsupported file format"))

    def write(self, result, value):
        for path in result.paths:
            self.check(path, result.key)

        written = []
        for path in result.paths:
            ext = Path(path).suffix.lower()
            if ext in YAML_EXTENSIONS:
                action = lambda: add_key_to_yaml(path, result.key, value, result.note)
            else:
                action = lambda: add_key_to_xliff(path, result.key, value, result.note)
            try:
                changed = self._run(path, action)
            except TranslationWriteError as e:
                e.written = list(written)
                raise

            if changed:
                logger.info(f"Added '{result.key}' to {path}")
                written.append(Path(path))
        return written
