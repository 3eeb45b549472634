# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from models.translation_file_model import TranslationFileModel
from utils.constants import PRIMARY_BUNDLE_WEIGHT, SOURCE_ROOT_WEIGHT, SOURCE_ROOT_PREFIXES
import logging
logger = logging.getLogger(__name__)


def build_candidates(domain, resolver, context_file):
    """
    Builds the ranked list of files a new key of ``domain`` can be written to.

    ``resolver`` provides ``resolve_domain_files``, ``is_supported_resource_format``,
    ``containing_bundle`` and ``relative_path``. Files sharing the bundle of
    ``context_file`` come first, then files below a source root; equal
    weights keep the resolver's order.
    """
    context_bundle = resolver.containing_bundle(context_file)

    candidates = []
    seen = set()
    for path in resolver.resolve_domain_files(domain):
        if path in seen:
            continue
        seen.add(path)
        if not resolver.is_supported_resource_format(path):
            logger.debug(f"Skipping unsupported translation file {path}")
            continue

        candidate = TranslationFileModel(path, resolver.relative_path(path))

        if context_bundle is not None and context_bundle.is_in_bundle(path):
            candidate.bundle = context_bundle
            candidate.is_primary = True
            candidate.add_weight(PRIMARY_BUNDLE_WEIGHT)
        else:
            candidate.bundle = resolver.containing_bundle(path)

        if candidate.relative_path is not None and candidate.relative_path.startswith(SOURCE_ROOT_PREFIXES):
            candidate.add_weight(SOURCE_ROOT_WEIGHT)

        candidates.append(candidate)

    candidates.sort(key=lambda c: c.weight, reverse=True)

    # only one file; fine preselect it
    if len(candidates) == 1:
        candidates[0].set_enabled(True)

    logger.debug(f"Domain '{domain}': {len(candidates)} candidate files for {Path(context_file).name}")
    return candidates


def toggle_include(candidate, value):
    candidate.set_enabled(value)


def collect_included(candidates):
    return [candidate for candidate in candidates if candidate.enabled]
