import io

from openpyxl import load_workbook

from catalogo.reports.search_report import generate_excel, generate_excel_bytes, generate_json


def test_excel_lists_grouped_codes_as_text(sample_store, tmp_path):
    path = generate_excel(sample_store, tmp_path / "out" / "agri.xlsx", "agri", 100)
    ws = load_workbook(path)["Resultados"]

    assert ws["A1"].value == "Catálogo SCIAN → BMX"
    assert ws["A3"].value == "Encontradas 2 coincidencias"
    header = [c.value for c in ws[5]]
    assert header == ["Categoría SCIAN", "Actividad BMXID", "Descripción"]
    rows = [[c.value for c in r] for r in ws.iter_rows(min_row=6)]
    assert rows == [
        ["Agricultura", "111", "Siembra"],
        [None, "112", "Cosecha"],
    ]


def test_excel_for_empty_query_has_header_only(sample_store, tmp_path):
    path = generate_excel(sample_store, tmp_path / "empty.xlsx", "", 100)
    ws = load_workbook(path)["Resultados"]
    assert ws["A4"].value == "Categoría SCIAN"
    assert ws.max_row == 4


def test_generate_json(sample_store):
    data = generate_json(sample_store, "pesca", 100)
    assert data["total"] == 1
    assert data["groups"][0]["items"][0]["ActividadBMX"] == "211"


def test_excel_bytes_match_file_layout(sample_store):
    ws = load_workbook(io.BytesIO(generate_excel_bytes(sample_store, "pesca", 100)))["Resultados"]
    assert ws["A3"].value == "Encontradas 1 coincidencias"
    assert [c.value for c in ws[6]] == ["Pesca", "211", "Captura"]
