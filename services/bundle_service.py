# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from utils.constants import BUNDLE_CLASS_SUFFIX
import logging
logger = logging.getLogger(__name__)


class Bundle:
    def __init__(self, name, root):
        self.name = name
        self.root = Path(root)

    def is_in_bundle(self, path) -> bool:
        try:
            Path(path).resolve().relative_to(self.root)
        except ValueError:
            return False
        return True

    def __eq__(self, other):
        if not isinstance(other, Bundle):
            return NotImplemented
        return self.name == other.name and self.root == other.root

    def __hash__(self):
        return hash((self.name, self.root))

    def __repr__(self):
        return f"Bundle({self.name!r}, {str(self.root)!r})"


class BundleService:
    """
    Resolves which bundle a file belongs to.

    A bundle is a directory that holds a ``*Bundle.php`` class file, named
    after that file. The nearest such directory between a file and the
    project root wins; the project root itself is never a bundle.
    """

    def __init__(self, project_root):
        self.project_root = Path(project_root).resolve()
        self._dir_cache = {}

    def get_containing_bundle(self, path):
        path = Path(path).resolve()
        current = path if path.is_dir() else path.parent
        try:
            current.relative_to(self.project_root)
        except ValueError:
            return None

        visited = []
        bundle = None
        while current != self.project_root:
            if current in self._dir_cache:
                bundle = self._dir_cache[current]
                break
            visited.append(current)
            bundle = self._bundle_at(current)
            if bundle is not None:
                break
            current = current.parent

        for directory in visited:
            self._dir_cache[directory] = bundle
        return bundle

    def _bundle_at(self, directory):
        try:
            candidates = sorted(p for p in directory.iterdir()
                                if p.is_file() and p.name.endswith(BUNDLE_CLASS_SUFFIX)
                                and p.name != BUNDLE_CLASS_SUFFIX)
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return None
        if not candidates:
            return None
        name = candidates[0].stem
        logger.debug(f"Found bundle '{name}' at {directory}")
        return Bundle(name, directory)

    def clear_cache(self):
        self._dir_cache.clear()
