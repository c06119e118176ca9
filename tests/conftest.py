from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garantisce che il pacchetto areeverdi sia importabile durante i test locali
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from areeverdi.repositories.json_storage import AreaStore  # noqa: E402


def make_area(id_loc, **fields):
    area = {
        "idLoc": id_loc,
        "zona": None,
        "tipo": None,
        "area": None,
        "classificazione": None,
        "affidatario": None,
        "classificazione_istat": None,
        "superficie_totale": None,
        "nome_loc": None,
        "descrizione": None,
    }
    area.update(fields)
    return area


@pytest.fixture()
def data_file(tmp_path):
    """Backing file seeded with a park (idLoc 1) and a school (idLoc 2)."""
    path = tmp_path / "data.json"
    AreaStore(path).save(
        [
            make_area(1, zona=1, tipo="Parco", superficie_totale=1234.5),
            make_area(2, zona=4, tipo="Scuola"),
        ]
    )
    return path
