# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import regex as re
from utils.constants import KEY_SLUG_MAX_LENGTH
from utils.localization import _

non_word_run_regex = re.compile(r'[^\p{L}\p{N}]+')


def validate_key(text, key_exists):
    """Advisory message for the key field, or None when the key can be used."""
    if key_exists(text):
        return _("Key already exists")
    return None


def extract_domain(key_text, fallback):
    dot = key_text.find('.')
    if dot <= 0:
        return fallback
    return key_text[:dot]


def suggest_key(literal, domain):
    slug = non_word_run_regex.sub('_', (literal or '').strip().lower()).strip('_')
    slug = slug[:KEY_SLUG_MAX_LENGTH].rstrip('_')
    if not slug:
        slug = "new_key"
    return f"{domain}.{slug}"
