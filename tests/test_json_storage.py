"""
Round-trip and failure tests for the JSON file stores.
"""
from __future__ import annotations

import json

import pytest

from areeverdi.repositories.json_storage import AreaStore, StorageError
from areeverdi.repositories.zone_storage import ZoneStore


def test_save_then_load_reproduces_every_field(tmp_path):
    store = AreaStore(tmp_path / "data.json")
    records = [
        {
            "idLoc": 1,
            "zona": 2,
            "tipo": "Parco",
            "area": 3,
            "classificazione": "Verde di quartiere",
            "affidatario": "Comune",
            "classificazione_istat": "Parchi urbani",
            "superficie_totale": 1234.5,
            "nome_loc": "Parco Nord",
            "descrizione": "Area giochi, percorso pedonale",
        },
        {
            "idLoc": 2,
            "zona": None,
            "tipo": "Filare",
            "area": None,
            "classificazione": None,
            "affidatario": None,
            "classificazione_istat": None,
            "superficie_totale": None,
            "nome_loc": "Viale dei Tigli",
            "descrizione": None,
        },
    ]

    store.save(records)

    assert store.load() == records


def test_disk_format_uses_labels_and_comma_decimals(tmp_path):
    path = tmp_path / "data.json"
    AreaStore(path).save([{"idLoc": 1, "superficie_totale": 1234.5, "nome_loc": "Città"}])

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw[0]["ID Localita"] == "1"
    assert raw[0]["Superficie totale in mq"] == "1234,5"
    assert raw[0]["Nome Localita"] == "Città"
    assert "Città" in path.read_text(encoding="utf-8")


def test_load_parses_comma_surface(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"ID Localita": "9", "Superficie totale in mq": "1234,5"}]), encoding="utf-8")

    area = AreaStore(path).load()[0]

    assert area["idLoc"] == 9
    assert area["superficie_totale"] == 1234.5


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(StorageError) as excinfo:
        AreaStore(tmp_path / "missing.json").load()
    assert excinfo.value.operation == "read"


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        AreaStore(path).load()


def test_load_requires_array(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"ID Localita": "1"}', encoding="utf-8")
    with pytest.raises(StorageError):
        AreaStore(path).load()


def test_save_failure_raises_write_error(tmp_path):
    store = AreaStore(tmp_path / "no-such-dir" / "data.json")
    with pytest.raises(StorageError) as excinfo:
        store.save([{"idLoc": 1}])
    assert excinfo.value.operation == "write"


def test_zone_store_reads_reference_file(tmp_path):
    path = tmp_path / "zoneCoords.json"
    path.write_text(
        json.dumps([{"Zona": 1, "Lat": 45.07, "Lon": "7,68", "Municipio": "Circoscrizione 1"}]),
        encoding="utf-8",
    )

    zones = ZoneStore(path).load()

    assert zones == [{"zona": 1, "lat": 45.07, "lon": 7.68, "municipio": "Circoscrizione 1"}]


def test_load_rejects_non_object_entries(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"ID Localita": "1"}, None, ["x"]]), encoding="utf-8")
    with pytest.raises(StorageError) as excinfo:
        AreaStore(path).load()
    assert "voce 1" in excinfo.value.message


def test_zone_store_rejects_non_object_entries(tmp_path):
    path = tmp_path / "zoneCoords.json"
    path.write_text(json.dumps([{"Zona": 1}, "Circoscrizione 2"]), encoding="utf-8")
    with pytest.raises(StorageError):
        ZoneStore(path).load()


def test_save_replaces_file_and_leaves_no_temp(tmp_path):
    store = AreaStore(tmp_path / "data.json")
    store.save([{"idLoc": 1}])
    store.save([{"idLoc": 2}])

    assert [a["idLoc"] for a in store.load()] == [2]
    assert not store.tmp_path.exists()


def test_failed_save_keeps_previous_content(tmp_path):
    path = tmp_path / "data.json"
    store = AreaStore(path)
    store.save([{"idLoc": 1}])
    before = path.read_bytes()
    store.tmp_path.mkdir()

    with pytest.raises(StorageError) as excinfo:
        store.save([{"idLoc": 2}])

    assert excinfo.value.operation == "write"
    assert path.read_bytes() == before
