import json

from catalogo import cli


def test_convert_success(write_csv, tmp_path, capsys):
    src = write_csv("DescripcionCIAN,ActividadBMXID,DescripcionBMX\nPesca,211,Captura\n,1,x\n")
    out = tmp_path / "public" / "catalogo.json"
    assert cli.main(["convert", "--csv", str(src), "--output", str(out)]) == 0
    assert "catalogo.json generado (1 filas)" in capsys.readouterr().out
    assert json.loads(out.read_text(encoding="utf-8"))[0]["ActividadBMX"] == "211"


def test_convert_missing_input_exits_nonzero(tmp_path, capsys):
    out = tmp_path / "catalogo.json"
    code = cli.main(["convert", "--csv", str(tmp_path / "nope.csv"), "--output", str(out)])
    assert code == 1
    assert "No se encontró" in capsys.readouterr().err
    assert not out.exists()


def test_search_prints_groups_and_writes_outputs(catalog_json, tmp_path, capsys):
    jpath = tmp_path / "r.json"
    xpath = tmp_path / "r.xlsx"
    code = cli.main([
        "search", "agri", "--catalog", str(catalog_json),
        "--max-results", "100", "--json", str(jpath), "--xlsx", str(xpath),
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "Encontradas 2 coincidencias" in out
    assert "Agricultura" in out and "111" in out and "Pesca" not in out
    assert json.loads(jpath.read_text(encoding="utf-8"))["shown"] == 2
    assert xpath.exists()


def test_search_no_match(catalog_json, capsys):
    assert cli.main(["search", "xyz", "--catalog", str(catalog_json)]) == 0
    assert 'No se encontraron resultados para "xyz"' in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "convert" in capsys.readouterr().out
