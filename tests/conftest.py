from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeBundle:
    def __init__(self, name: str, members: set[str]) -> None:
        self.name = name
        self.members = set(members)

    def is_in_bundle(self, path) -> bool:
        return path in self.members


class FakeResolver:
    """In-memory stand-in for the translation index."""

    def __init__(
        self,
        domain_files: dict[str, list[str]],
        bundles: list[FakeBundle] | None = None,
        relative_paths: dict[str, str] | None = None,
        unsupported: set[str] | None = None,
        existing_keys: set[str] | None = None,
    ) -> None:
        self.domain_files = domain_files
        self.bundles = bundles or []
        self.relative_paths = relative_paths or {}
        self.unsupported = unsupported or set()
        self.existing_keys = existing_keys or set()
        self.key_checks: list[str] = []

    def resolve_domain_files(self, domain: str) -> list[str]:
        return list(self.domain_files.get(domain, []))

    def is_supported_resource_format(self, path) -> bool:
        return path not in self.unsupported

    def containing_bundle(self, path):
        for bundle in self.bundles:
            if bundle.is_in_bundle(path):
                return bundle
        return None

    def relative_path(self, path):
        return self.relative_paths.get(path)

    def has_translation_key(self, key: str) -> bool:
        self.key_checks.append(key)
        return key in self.existing_keys

    def get_domains(self) -> list[str]:
        return sorted(self.domain_files)


@pytest.fixture
def make_resolver():
    return FakeResolver


@pytest.fixture
def make_bundle():
    return FakeBundle


XLIFF_12 = """<?xml version="1.0" encoding="utf-8"?>
<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2">
    <file source-language="en" datatype="plaintext" original="file.ext">
        <body>
            <trans-unit id="a1" resname="app.title">
                <source>app.title</source>
                <target>Title</target>
            </trans-unit>
            <trans-unit id="a2">
                <source>app.subtitle</source>
                <target>Subtitle</target>
            </trans-unit>
        </body>
    </file>
</xliff>
"""

XLIFF_20 = """<?xml version="1.0" encoding="utf-8"?>
<xliff xmlns="urn:oasis:names:tc:xliff:document:2.0" version="2.0" srcLang="en" trgLang="de">
    <file id="messages.de">
        <unit id="u1" name="shop.cart">
            <segment>
                <source>shop.cart</source>
                <target>Warenkorb</target>
            </segment>
        </unit>
    </file>
</xliff>
"""

PO_FILE = '''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

msgid "legacy.welcome"
msgstr "Welcome"
'''


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project with an app-level catalogue, a bundle and vendor files."""
    root = tmp_path / "project"

    (root / "translations").mkdir(parents=True)
    (root / "translations" / "messages.en.yml").write_text(
        "app:\n    greeting: Hello\nfooter: Bye\n", encoding="utf-8"
    )
    (root / "translations" / "messages.de.xlf").write_text(XLIFF_12, encoding="utf-8")
    (root / "translations" / "messages.fr.po").write_text(PO_FILE, encoding="utf-8")
    (root / "translations" / "validators.en.json").write_text(
        '{"form": {"required": "Required"}}', encoding="utf-8"
    )
    (root / "translations" / "README.md").write_text("not a catalogue", encoding="utf-8")

    bundle_dir = root / "src" / "ShopBundle"
    (bundle_dir / "Resources" / "translations").mkdir(parents=True)
    (bundle_dir / "ShopBundle.php").write_text("<?php class ShopBundle {}", encoding="utf-8")
    (bundle_dir / "Controller").mkdir()
    (bundle_dir / "Controller" / "CartController.php").write_text("<?php", encoding="utf-8")
    (bundle_dir / "Resources" / "translations" / "messages.de.xlf").write_text(XLIFF_20, encoding="utf-8")
    (bundle_dir / "Resources" / "translations" / "messages.en.yml").write_text(
        "shop.checkout: Checkout\n", encoding="utf-8"
    )

    vendor = root / "vendor" / "acme" / "translations"
    vendor.mkdir(parents=True)
    (vendor / "messages.en.yml").write_text("vendor.key: Vendor\n", encoding="utf-8")

    return root
