# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path


class TranslationFileModel:
    """A translation file offered as a write target for a new key."""

    def __init__(self, path, relative_path=None):
        self.path = Path(path)
        self.relative_path = relative_path
        self.bundle = None
        self.is_primary = False
        self.weight = 0
        self.enabled = False

    @property
    def name(self):
        return self.path.name

    @property
    def file_format(self):
        return self.path.suffix.lstrip('.').lower()

    def add_weight(self, weight: int):
        if weight < 0:
            raise ValueError("weight bonuses are additive")
        self.weight += weight

    def set_enabled(self, enabled: bool):
        self.enabled = bool(enabled)

    def get_display_path(self):
        if self.bundle is not None:
            return self.bundle.name
        if self.relative_path is not None:
            return self.relative_path
        return self.name

    def __repr__(self):
        return (f"TranslationFileModel({self.name!r}, weight={self.weight}, "
                f"primary={self.is_primary}, enabled={self.enabled})")
