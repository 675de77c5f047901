import json

import pandas as pd
import pytest

from catalogo.data.store import CatalogStore


SAMPLE_ROWS = [
    {"DescripcionCIAN": "Agricultura", "ActividadBMX": "111", "DescripcionBMX": "Siembra"},
    {"DescripcionCIAN": "Agricultura", "ActividadBMX": "112", "DescripcionBMX": "Cosecha"},
    {"DescripcionCIAN": "Pesca", "ActividadBMX": "211", "DescripcionBMX": "Captura"},
]


@pytest.fixture
def sample_rows():
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture
def sample_store(sample_rows):
    return CatalogStore.from_frame(pd.DataFrame(sample_rows))


@pytest.fixture
def catalog_json(tmp_path, sample_rows):
    path = tmp_path / "catalogo.json"
    path.write_text(json.dumps(sample_rows, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "catalogo.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
