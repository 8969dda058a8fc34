import json

from todo_api.generate_openapi import generate_openapi, main


def test_generate_openapi_writes_schema(tmp_path):
    out = tmp_path / "nested" / "openapi.json"
    path = generate_openapi(str(out))
    assert path == str(out)

    schema = json.loads(out.read_text(encoding="utf-8"))
    assert schema["info"]["title"] == "Todo API"
    assert {"/todos", "/todos/{todo_id}"} <= set(schema["paths"])
    assert set(schema["paths"]["/todos/{todo_id}"]) == {"get", "patch", "delete"}
    assert {t["name"] for t in schema["tags"]} >= {"health", "todos"}
    assert set(schema["components"]["schemas"]["TodoOut"]["properties"]) == {"id", "title", "completed", "order"}


def test_main_accepts_output_argument(tmp_path):
    out = tmp_path / "openapi.json"
    main([str(out)])
    assert out.exists()


def test_main_reports_written_path(tmp_path, capsys):
    out = tmp_path / "openapi.json"
    main([str(out)])
    assert f"Wrote OpenAPI schema to: {out}" in capsys.readouterr().out
