from main import AppController, parse_args


def test_parse_args():
    args = parse_args(["/proj", "/proj/src/a.php", "Hello world", "--domain", "forms"])

    assert args.project_root == "/proj"
    assert args.context_file == "/proj/src/a.php"
    assert args.literal == "Hello world"
    assert args.domain == "forms"
    assert args.key is None


def test_initial_domain_prefers_request_then_last_then_default(make_resolver):
    index = make_resolver({"messages": [], "forms": []})
    config = {"last_domain": "forms", "default_domain": "messages"}
    controller = AppController(config, "/proj", "/proj/a.php", "Hi")

    assert controller._initial_domain(index, "admin") == "admin"
    assert controller._initial_domain(index, None) == "forms"

    config["last_domain"] = "gone"
    assert controller._initial_domain(index, None) == "messages"


def test_initial_domain_without_catalogues_uses_default(make_resolver):
    controller = AppController({"default_domain": ""}, "/proj", "/proj/a.php", "Hi")

    assert controller._initial_domain(make_resolver({}), None) == ""
    assert controller._initial_domain(make_resolver({"b": [], "a": []}), None) == "a"


def test_write_error_lists_files_already_changed():
    from pathlib import Path

    from services.translation_writer_service import TranslationWriteError

    error = TranslationWriteError(Path("/proj/translations/messages.fr.yml"), "disk full")
    assert AppController.describe_write_error(error) == str(error)

    error.written = [Path("/proj/translations/messages.en.yml")]
    message = AppController.describe_write_error(error)
    assert message.startswith(str(error))
    assert message.endswith("/proj/translations/messages.en.yml")
