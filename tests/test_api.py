"""HTTP binding: status codes and envelope shapes for the function-calling endpoints."""

import pytest


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "timestamp" in data


def test_status_lists_functions_and_dataset(client) -> None:
    data = client.get("/api/status").json()
    assert len(data["functions"]) == 6
    assert data["dataset"]["author"] == 3


def test_list_functions(client) -> None:
    r = client.get("/api/functions")
    assert r.status_code == 200
    functions = r.json()["functions"]
    assert [f["name"] for f in functions] == [
        "getEntity", "searchEntities", "getMetrics", "compareEntities", "getTrend", "getTopEntities",
    ]
    search = functions[1]["parameters"]
    assert search["required"] == ["entityType", "query"]
    assert search["properties"]["limit"]["default"] == 10


def test_query_success(client) -> None:
    r = client.post("/api/query/compareEntities", json={
        "entityType": "author", "entityIdA": "auth_002", "entityIdB": "auth_001", "metric": "citations",
    })
    assert r.status_code == 200
    result = r.json()["result"]
    assert result["entityA"] == {"id": "auth_002", "name": "Prof. James Anderson", "value": 8912}
    assert result["entityB"]["value"] == 4823
    assert result["difference"] == 4089
    assert result["percentDifference"] == pytest.approx(84.78, abs=0.01)


def test_query_null_result_is_200(client) -> None:
    r = client.post("/api/query/getEntity", json={"entityType": "author", "entityId": "nonexistent"})
    assert r.status_code == 200
    assert r.json() == {"result": None}


def test_query_unknown_function_is_404(client) -> None:
    r = client.post("/api/query/dropTables", json={})
    assert r.status_code == 404
    data = r.json()
    assert data["error"] == "Function 'dropTables' not found"
    assert data["errorType"] == "function_not_found"


def test_query_invalid_parameters_is_400(client) -> None:
    r = client.post("/api/query/getTopEntities", json={"entityType": "planet", "metric": "citations"})
    assert r.status_code == 400
    data = r.json()
    assert data["error"] == "Invalid parameters"
    assert data["errorType"] == "invalid_parameters"
    assert data["details"][0]["field"] == "entityType"


def test_query_without_body_reports_missing_fields(client) -> None:
    r = client.post("/api/query/getEntity")
    assert r.status_code == 400
    assert {d["field"] for d in r.json()["details"]} == {"entityType", "entityId"}


def test_query_trend_range(client) -> None:
    r = client.post("/api/query/getTrend", json={
        "entityId": "auth_001", "metric": "publications", "startYear": 2020, "endYear": 2022,
    })
    assert r.json()["result"] == [
        {"year": 2020, "value": 15}, {"year": 2021, "value": 18}, {"year": 2022, "value": 22},
    ]


def test_batch_valid_and_invalid(client) -> None:
    r = client.post("/api/batch", json={"queries": [
        {"functionName": "getEntity", "params": {"entityType": "author", "entityId": "auth_001"}},
        {"functionName": "getEntity", "params": {"entityType": "author"}},
    ]})
    assert r.status_code == 200
    results = r.json()["results"]
    assert len(results) == 2
    assert results[0]["success"] is True
    assert results[0]["result"]["name"] == "Dr. Sarah Chen"
    assert results[1]["success"] is False
    assert results[1]["errorType"] == "invalid_parameters"
    assert results[1]["details"][0]["field"] == "entityId"


def test_batch_unknown_function_item(client) -> None:
    results = client.post("/api/batch", json={"queries": [{"functionName": "nope", "params": {}}]}).json()["results"]
    assert results == [{"success": False, "error": "Function 'nope' not found", "errorType": "function_not_found"}]


@pytest.mark.parametrize("body", [{}, {"queries": "getEntity"}, {"queries": None}, [1, 2]])
def test_batch_requires_queries_array(client, body) -> None:
    r = client.post("/api/batch", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "queries must be an array"}


@pytest.mark.parametrize("path", ["/api/query/getEntity", "/api/batch", "/api/chat"])
def test_malformed_json_body_is_400_invalid_parameters(client, path) -> None:
    r = client.post(
        path,
        content=b'{"entityType": "author",',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    data = r.json()
    assert data["error"] == "Invalid parameters"
    assert data["errorType"] == "invalid_parameters"
    [detail] = data["details"]
    assert detail["field"] == "<root>"
    assert detail["code"] == "json_invalid"
    assert detail["expected"] == "object"
    assert detail["receivedType"] == "invalid_json"


def test_limit_minimum_advertised(client) -> None:
    functions = {f["name"]: f for f in client.get("/api/functions").json()["functions"]}
    assert functions["getTopEntities"]["parameters"]["properties"]["limit"]["minimum"] == 0
