from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote pals_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pals_api.core.errors import PersistenceError  # noqa: E402
from pals_api.repositories.json_storage import JsonDocument, empty_pals, pal_defaults  # noqa: E402


def test_load_missing_file_returns_default_without_creating_it(tmp_path):
    doc = JsonDocument(tmp_path / "pals.json", empty_pals)

    assert doc.load() == {"pals": []}
    assert not doc.path.exists()


def test_save_pretty_prints_with_four_spaces_and_keeps_unicode(tmp_path):
    doc = JsonDocument(tmp_path / "nested" / "elements.json", dict)
    doc.save({"Água": "https://example.com/agua.png", "Fire": "x"})

    text = doc.path.read_text(encoding="utf-8")
    assert text == json.dumps({"Água": "https://example.com/agua.png", "Fire": "x"}, ensure_ascii=False, indent=4)
    assert "Água" in text
    assert list(doc.load()) == ["Água", "Fire"]


def test_save_overwrites_previous_content(tmp_path):
    doc = JsonDocument(tmp_path / "elements.json", dict)
    doc.save({"Fire": "a", "Water": "b"})
    doc.save({"Grass": "c"})

    assert doc.load() == {"Grass": "c"}


def test_save_failure_surfaces_persistence_error(tmp_path):
    doc = JsonDocument(tmp_path, dict)  # diretório, não arquivo

    with pytest.raises(PersistenceError) as info:
        doc.save({"Fire": "x"})

    assert info.value.status_code == 500
    assert info.value.message


def test_pal_defaults_adds_missing_collection():
    assert pal_defaults({}) == {"pals": []}
    existing = {"pals": [{"id": "001"}]}
    assert pal_defaults(existing) is existing


def test_save_refuses_non_finite_numbers(tmp_path):
    doc = JsonDocument(tmp_path / "pals.json", empty_pals)

    with pytest.raises(PersistenceError):
        doc.save({"pals": [{"id": "001", "power": float("nan")}]})
    assert not doc.path.exists()


def test_load_refuses_non_standard_constants(tmp_path):
    path = tmp_path / "pals.json"
    path.write_text('{"pals": [{"id": "001", "power": Infinity}]}', encoding="utf-8")

    with pytest.raises(ValueError):
        JsonDocument(path, empty_pals).load()
