from services.bundle_service import Bundle, BundleService


def test_file_inside_bundle_resolves_to_nearest_bundle(project):
    service = BundleService(project)

    bundle = service.get_containing_bundle(project / "src" / "ShopBundle" / "Controller" / "CartController.php")

    assert bundle == Bundle("ShopBundle", (project / "src" / "ShopBundle").resolve())
    assert bundle.is_in_bundle(
        project / "src" / "ShopBundle" / "Resources" / "translations" / "messages.en.yml"
    )
    assert not bundle.is_in_bundle(project / "translations" / "messages.en.yml")


def test_file_outside_bundles_has_none(project, tmp_path):
    service = BundleService(project)

    assert service.get_containing_bundle(project / "translations" / "messages.en.yml") is None
    assert service.get_containing_bundle(tmp_path / "elsewhere.php") is None


def test_lookups_are_cached_until_cleared(project):
    service = BundleService(project)
    target = project / "translations" / "messages.en.yml"
    assert service.get_containing_bundle(target) is None

    (project / "translations" / "AppBundle.php").write_text("<?php", encoding="utf-8")
    assert service.get_containing_bundle(target) is None

    service.clear_cache()
    assert service.get_containing_bundle(target).name == "AppBundle"
