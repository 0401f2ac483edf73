"""Tests for file helpers and translation loading."""

import json

import pytest

from ecolca.utils import i18n
from ecolca.utils.file_utils import FileUtils
from ecolca.utils.i18n import Translator


@pytest.fixture
def lang_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(i18n, "LANG_FILE_DIR", tmp_path)
    monkeypatch.setattr(Translator, "_cache", {})
    return tmp_path


def test_translations_loaded_from_file(lang_dir):
    (lang_dir / "nl.json").write_text(json.dumps({"nav.results": "Resultaten"}), encoding="utf-8")
    assert Translator._load("nl") == {"nav.results": "Resultaten"}


def test_missing_or_broken_language_file_is_empty(lang_dir):
    (lang_dir / "en.json").write_text("{oops", encoding="utf-8")
    assert Translator._load("en") == {}
    assert Translator._load("nl") == {}


def test_unsupported_language_rejected():
    with pytest.raises(ValueError):
        Translator.set_language("fr")


@pytest.mark.parametrize("name, expected", [
    ("Bike Frame", "EcoLCA_Report_Bike_Frame.docx"),
    ("a/b:c", "EcoLCA_Report_a_b_c.docx"),
    ("", "EcoLCA_Report_product.docx"),
])
def test_safe_filename(name, expected):
    assert FileUtils.safe_filename(name, "docx") == expected


def test_logo_fallbacks(tmp_path):
    assert FileUtils.load_logo_bytes([tmp_path / "none.png"]) is None
    assert "<span" in FileUtils.create_logo_tag(None)

    logo = tmp_path / "logo.png"
    logo.write_bytes(b"\x89PNG")
    data = FileUtils.load_logo_bytes([tmp_path / "none.png", logo])
    assert data == b"\x89PNG"
    assert FileUtils.create_logo_tag(data).startswith("<img")
