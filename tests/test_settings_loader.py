import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from person_records.io import parse_all
from person_records.io.settings_loader import Settings, apply_settings, load_settings


def test_load_settings_defaults_when_missing(tmp_path):
    assert load_settings(None) == Settings()
    assert load_settings(str(tmp_path / "missing.yaml")) == Settings()


def test_load_settings_empty_file(tmp_path):
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("", encoding="utf8")
    assert load_settings(str(settings_file)) == Settings()


def test_load_settings_valid(tmp_path):
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("encoding: latin-1\nlog_level: debug\n", encoding="utf8")
    settings = load_settings(str(settings_file))
    assert settings.encoding == "latin-1"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "content",
    [
        "- encoding\n",
        "colour: blue\n",
        "log_level: loud\n",
        "encoding: 8\n",
        "encoding: no-such-codec\n",
    ],
)
def test_load_settings_validation_errors(tmp_path, content):
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(content, encoding="utf8")
    with pytest.raises(ValueError):
        load_settings(str(settings_file))


def test_apply_settings_sets_package_log_level():
    package_logger = logging.getLogger("person_records")
    previous = package_logger.level
    try:
        apply_settings(Settings(log_level="WARNING"))
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(previous)


def test_encoding_setting_is_used_by_parse_all(tmp_path):
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("encoding: latin-1\n", encoding="utf8")
    people_file = tmp_path / "people.txt"
    people_file.write_bytes("1 Jérôme Lefèvre 175011234567\n".encode("latin-1"))

    settings = load_settings(str(settings_file))
    people = parse_all(str(people_file), encoding=settings.encoding)
    assert people[0].first_name == "Jérôme"
    assert people[0].last_name == "Lefèvre"
