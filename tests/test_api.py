"""
API tests for the /api/cnc calculator endpoints and saved calculations.
"""

DIMS = {"length": 1000, "width": 600, "height": 900, "is_outside_dimension": True}


def _bom_request(**table_config):
    return {
        "dimensions": DIMS,
        "table_config": table_config,
        "material_config": {},
    }


# ============================================================
# Calculator endpoints
# ============================================================

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_calculate_table_materials(client):
    resp = client.post("/api/cnc/calculate-table-materials", json=DIMS)
    assert resp.status_code == 200
    data = resp.json()
    lengths = {cut["description"]: cut["length_mm"] for cut in data["extrusions"]}
    assert lengths["Table length rail"] == 1000
    assert lengths["Table leg"] == 860
    assert data["hardware"]["FEET"] == 4


def test_calculate_enclosure_materials(client):
    resp = client.post("/api/cnc/calculate-enclosure-materials",
                       json={**DIMS, "length": 1600})
    assert resp.status_code == 200
    data = resp.json()
    assert data["large_span"] is True
    assert data["top_profile"] == "2040"
    assert data["profile_totals"] == {"2020": 7760, "2040": 4400}


def test_calculate_mounting_materials(client):
    resp = client.get("/api/cnc/calculate-mounting-materials")
    assert resp.status_code == 200
    assert resp.json()["hardware"]["IOCNR_40"] == 4


def test_calculate_door_materials(client):
    resp = client.post("/api/cnc/calculate-door-materials", json={
        "dimensions": DIMS,
        "door_config": {"front_door": True, "door_type": "BFLD"},
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["door_type"] == "BFLD"
    assert [p["width_mm"] for p in data["panels"]] == [271, 271]


def test_calculate_panel_materials_forces_panels_on(client):
    resp = client.post("/api/cnc/calculate-panel-materials", json={
        "dimensions": DIMS,
        "material_config": {"include_panels": False, "panel_config": {"top": True}},
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["channel_mounted"] is True
    assert data["total_area_mm2"] == 548 * 948


def test_calculate_bom(client):
    resp = client.post("/api/cnc/calculate-bom", json=_bom_request(
        include_table=True, include_enclosure=True, mount_enclosure_to_table=True,
    ))
    assert resp.status_code == 200
    data = resp.json()
    assert data["bom"]["sections"]["table"] == "computed"
    assert data["bom"]["sections"]["doors"] == "not_requested"
    assert data["bom"]["mounting"]["hardware"]["IOCNR_40"] == 4
    assert data["bom"]["doors"] is None
    assert {row["section"] for row in data["line_items"]} == {"table", "enclosure", "mounting"}


def test_calculate_bom_reports_omitted_mounting(client):
    resp = client.post("/api/cnc/calculate-bom", json=_bom_request(
        include_table=True, mount_enclosure_to_table=True,
    ))
    assert resp.status_code == 200
    bom = resp.json()["bom"]
    assert bom["sections"]["mounting"] == "omitted"
    assert "InconsistentComposition" in bom["warnings"][0]


def test_invalid_dimensions_return_422_with_every_field(client):
    resp = client.post("/api/cnc/calculate-bom", json={
        "dimensions": {"length": 0, "width": 600, "height": 900},
        "table_config": {"include_table": True, "door_config": {"door_type": "SLIDING"}},
    })
    assert resp.status_code == 422
    data = resp.json()
    assert data["error_type"] == "validation"
    assert [d["field"] for d in data["details"]] == ["length", "door_type"]
    assert data["details"][1]["code"] == "invalid_door_type"


def test_single_section_validation_error(client):
    resp = client.post("/api/cnc/calculate-table-materials",
                       json={"length": 1000, "width": -1, "height": 900})
    assert resp.status_code == 422
    assert resp.json()["details"][0]["field"] == "width"


def test_infinite_dimension_returns_422(client):
    # JSON has no infinity literal, but Python's parser accepts one
    resp = client.post("/api/cnc/calculate-table-materials",
                       content='{"length": Infinity, "width": 600, "height": 900}',
                       headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert [d["field"] for d in resp.json()["details"]] == ["length"]


def test_huge_dimension_returns_422(client):
    resp = client.post("/api/cnc/calculate-table-materials",
                       json={"length": 1e308, "width": 600, "height": 900})
    assert resp.status_code == 422
    assert resp.json()["details"][0]["field"] == "length"


def test_missing_field_is_request_validation_error(client):
    resp = client.post("/api/cnc/calculate-table-materials", json={"length": 1000})
    assert resp.status_code == 422
    assert "detail" in resp.json()


def test_list_extrusions(client):
    resp = client.get("/api/cnc/extrusions")
    assert resp.status_code == 200
    keys = [p["key"] for p in resp.json()]
    assert keys == ["2020", "2040", "2060", "4040", "4080"]


def test_list_materials(client):
    resp = client.get("/api/cnc/materials")
    assert resp.status_code == 200
    assert "corflute-clear-6mm" in [m["key"] for m in resp.json()]


# ============================================================
# Saved calculations
# ============================================================

def _save(client, name="Workshop table"):
    resp = client.post("/api/calculations/", json={
        "name": name,
        "notes": "1000 x 600 frame",
        "request": _bom_request(include_table=True),
    })
    assert resp.status_code == 200
    return resp.json()


def test_save_calculation_stores_result(client):
    saved = _save(client)
    assert saved["id"] > 0
    assert saved["name"] == "Workshop table"
    assert saved["result"]["sections"]["table"] == "computed"
    assert saved["request"]["dimensions"]["length"] == 1000


def test_get_and_list_calculations(client):
    first = _save(client, "First")
    _save(client, "Second")

    resp = client.get(f"/api/calculations/{first['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "First"

    resp = client.get("/api/calculations/")
    assert [c["name"] for c in resp.json()] == ["First", "Second"]


def test_update_calculation_clears_notes(client):
    saved = _save(client)
    resp = client.patch(f"/api/calculations/{saved['id']}", json={"notes": None})
    assert resp.status_code == 200
    assert resp.json()["notes"] is None
    assert client.get(f"/api/calculations/{saved['id']}").json()["notes"] is None


def test_update_calculation_rejects_null_name(client):
    saved = _save(client)
    resp = client.patch(f"/api/calculations/{saved['id']}", json={"name": None})
    assert resp.status_code == 400
    assert client.get(f"/api/calculations/{saved['id']}").json()["name"] == "Workshop table"


def test_update_calculation_name_only(client):
    saved = _save(client)
    resp = client.patch(f"/api/calculations/{saved['id']}", json={"name": "Renamed"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Renamed"
    assert data["notes"] == "1000 x 600 frame"


def test_delete_calculation_is_soft(client, db):
    from cnc_tools import models

    saved = _save(client)
    resp = client.delete(f"/api/calculations/{saved['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "id": saved["id"]}

    assert client.get(f"/api/calculations/{saved['id']}").status_code == 404
    assert client.get("/api/calculations/").json() == []

    record = db.get(models.SavedCalculation, saved["id"])
    assert record is not None
    assert record.is_deleted


def test_missing_calculation_404(client):
    assert client.get("/api/calculations/999").status_code == 404
    assert client.delete("/api/calculations/999").status_code == 404


def test_invalid_request_not_saved(client):
    resp = client.post("/api/calculations/", json={
        "name": "Broken",
        "request": {"dimensions": {"length": -10, "width": 600, "height": 900}},
    })
    assert resp.status_code == 422
    assert client.get("/api/calculations/").json() == []


def test_app_and_fixtures_share_one_engine(client, db):
    from cnc_tools import models
    from cnc_tools.database import get_engine

    assert db.get_bind() is get_engine()
    assert get_engine().url.render_as_string(hide_password=False) == "sqlite:///./test.db"

    saved = _save(client)
    assert db.get(models.SavedCalculation, saved["id"]).name == "Workshop table"
