# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional
from models.translation_file_model import TranslationFileModel
from services.candidate_service import build_candidates, collect_included, toggle_include
from services.key_validation_service import validate_key, extract_domain
import logging
logger = logging.getLogger(__name__)


class ConfirmAction(Enum):
    ACCEPTED = auto()   # result produced, close the dialog
    REFUSED = auto()    # keep the dialog open
    DISCARDED = auto()  # close the dialog without a result


@dataclass
class ConfirmResult:
    files: List[TranslationFileModel]
    key: str
    domain: str
    note: str = ""
    navigate: bool = False

    @property
    def paths(self):
        return [f.path for f in self.files]


@dataclass
class ConfirmOutcome:
    action: ConfirmAction
    result: Optional[ConfirmResult] = None


class _Cancelled:
    def __bool__(self):
        return False

    def __repr__(self):
        return "Cancelled"


Cancelled = _Cancelled()


@dataclass
class ExtractionSession:
    """State behind the extract-key dialog, free of any widget code."""
    index: object
    context_file: Path
    domains: List[str] = field(default_factory=list)
    current_domain: str = ""
    key_text: str = ""
    note: str = ""
    navigate: bool = False
    candidates: List[TranslationFileModel] = field(default_factory=list)

    def filter_list(self, domain):
        # full rebuild; nothing survives a domain switch
        self.current_domain = domain
        self.candidates = build_candidates(domain, self.index, self.context_file)
        return self.candidates

    def set_included(self, row, value):
        toggle_include(self.candidates[row], value)

    def key_error(self):
        return validate_key(self.key_text, self.index.has_translation_key)

    def confirm(self) -> ConfirmOutcome:
        text = self.key_text

        if self.index.has_translation_key(text):
            logger.info(f"Refusing existing key '{text}'")
            return ConfirmOutcome(ConfirmAction.REFUSED)

        if not text.strip():
            logger.debug("Blank key, closing without result")
            return ConfirmOutcome(ConfirmAction.DISCARDED)

        files = collect_included(self.candidates)
        if not files:
            logger.debug("No target file selected, closing without result")
            return ConfirmOutcome(ConfirmAction.DISCARDED)

        result = ConfirmResult(
            files=files,
            key=text,
            domain=extract_domain(text, self.current_domain),
            note=self.note,
            navigate=self.navigate,
        )
        logger.info(f"Key '{text}' accepted for {len(files)} file(s) in domain '{result.domain}'")
        return ConfirmOutcome(ConfirmAction.ACCEPTED, result)
