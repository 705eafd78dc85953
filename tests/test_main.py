import json
import pytest
from product_catalog.main import main

ADD = ["add", "--title", "A", "--description", "d", "--price", "9.99",
       "--thumbnail", "t.jpg", "--code", "C1", "--stock", "10"]

@pytest.fixture
def catalog_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_REJECT_ZERO_PRICE", "")
    monkeypatch.setenv("CATALOG_UNIQUE_CODE_ON_UPDATE", "")
    return str(tmp_path / "products.json")

def test_cli_add_list_update_delete(catalog_file, capsys):
    assert main(["--file", catalog_file] + ADD) == 0
    assert json.loads(capsys.readouterr().out)["id"] == 1

    assert main(["--file", catalog_file] + ADD) == 1
    capsys.readouterr()

    assert main(["--file", catalog_file, "update", "1", "--set", "price=11.5", "--set", "title=Nuevo"]) == 0
    updated = json.loads(capsys.readouterr().out)
    assert updated["price"] == 11.5
    assert updated["title"] == "Nuevo"

    assert main(["--file", catalog_file, "list"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 1

    assert main(["--file", catalog_file, "delete", "1"]) == 0
    assert main(["--file", catalog_file, "get", "1"]) == 1

def test_cli_not_found(catalog_file):
    assert main(["--file", catalog_file, "update", "10", "--set", "price=1"]) == 1
    assert main(["--file", catalog_file, "delete", "10"]) == 1

def test_cli_rejects_bad_assignment(catalog_file):
    main(["--file", catalog_file] + ADD)
    with pytest.raises(SystemExit):
        main(["--file", catalog_file, "update", "1", "--set", "sin-igual"])

def test_cli_export_csv(catalog_file, tmp_path):
    main(["--file", catalog_file] + ADD)
    out = tmp_path / "out.csv"
    assert main(["--file", catalog_file, "export", str(out)]) == 0
    assert "C1" in out.read_text(encoding="utf-8")

def test_cli_update_with_wrong_type_fails_and_keeps_product(catalog_file):
    main(["--file", catalog_file] + ADD)
    assert main(["--file", catalog_file, "update", "1", "--set", "stock=muchos"]) == 1
    assert main(["--file", catalog_file, "get", "1"]) == 0
