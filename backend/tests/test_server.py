import math

import pytest
from fastapi.testclient import TestClient

import server
from server import app


client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_list_operations():
    data = client.get("/operations").json()
    vector_ops = {op["id"] for op in data["vectors"]}
    point_ops = {op["id"] for op in data["points"]}
    assert {"plus", "minus", "dot", "cross", "inner_angle"} <= vector_ops
    assert point_ops == {"unit_vector_points", "inner_angle_points", "plane_unit_normal", "tri_area_points"}


def test_plus_many_operands():
    response = client.post("/vectors/plus", json={
        "vector": {"x": 1, "y": 2, "z": 3},
        "others": [{"x": 1, "y": 1, "z": 1}, {"x": -2}],
    })
    assert response.status_code == 200
    assert response.json() == {"operation": "plus", "result": {"x": 0.0, "y": 3.0, "z": 4.0}}


def test_length_with_zero_filled_components():
    response = client.post("/vectors/length", json={"vector": {"x": 3, "y": 4}})
    assert response.json()["result"] == 5.0


def test_scalar_mult_requires_factor():
    response = client.post("/vectors/scalar_mult", json={"vector": {"x": 1}})
    assert response.status_code == 400

    response = client.post("/vectors/scalar_mult", json={"vector": {"x": 1, "y": 2}, "factor": 3})
    assert response.json()["result"] == {"x": 3.0, "y": 6.0, "z": 0.0}


def test_dot_requires_exactly_one_operand():
    response = client.post("/vectors/dot", json={"vector": {"x": 1}})
    assert response.status_code == 400

    response = client.post("/vectors/dot", json={
        "vector": {"x": 1, "y": 2, "z": 3},
        "others": [{"x": 4, "y": 5, "z": 6}],
    })
    assert response.json()["result"] == 32.0


def test_length_rejects_operands():
    response = client.post("/vectors/length", json={"vector": {"x": 1}, "others": [{"x": 1}]})
    assert response.status_code == 400


def test_inner_angle_in_degrees():
    body = {"vector": {"x": 1}, "others": [{"y": 1, "x": 0}]}
    radians = client.post("/vectors/inner_angle", json=body).json()["result"]
    degrees = client.post("/vectors/inner_angle?degrees=true", json=body).json()["result"]
    assert radians == pytest.approx(math.pi / 2)
    assert degrees == pytest.approx(90.0)


def test_direction_angles_returns_list():
    response = client.post("/vectors/direction_angles?degrees=true", json={"vector": {"x": 2}})
    assert response.json()["result"] == pytest.approx([0.0, 90.0, 90.0])


def test_unit_vector_of_zero_vector_is_422():
    response = client.post("/vectors/unit_vector", json={"vector": {"x": 0}})
    assert response.status_code == 422
    assert "zero-length" in response.json()["detail"]


def test_unknown_operation_is_404():
    response = client.post("/vectors/triple_product", json={"vector": {"x": 1}})
    assert response.status_code == 404
    response = client.post("/points/equil", json={"points": []})
    assert response.status_code == 404


def test_tri_area_points():
    response = client.post("/points/tri_area_points", json={
        "points": [{"x": 0}, {"x": 1}, {"x": 0, "y": 1}],
    })
    assert response.json() == {"operation": "tri_area_points", "result": 0.5}


def test_plane_unit_normal():
    response = client.post("/points/plane_unit_normal", json={
        "points": [{"x": 0}, {"x": 1}, {"x": 0, "y": 1}],
    })
    assert response.json()["result"] == {"x": 0.0, "y": 0.0, "z": 1.0}


def test_plane_unit_normal_collinear_is_422():
    response = client.post("/points/plane_unit_normal", json={
        "points": [{"x": 0}, {"x": 1, "y": 1, "z": 1}, {"x": 2, "y": 2, "z": 2}],
    })
    assert response.status_code == 422


def test_point_count_is_checked():
    response = client.post("/points/unit_vector_points", json={"points": [{"x": 1}]})
    assert response.status_code == 400


def test_inner_angle_points_names_itself_in_error():
    response = client.post("/points/inner_angle_points", json={
        "points": [{"x": 0}, {"x": 0}, {"x": 0, "y": 1}],
    })
    assert response.status_code == 422
    assert response.json()["detail"].startswith("inner_angle_points")


def test_length_of_huge_and_tiny_vectors():
    response = client.post("/vectors/length", json={"vector": {"x": 1e200}})
    assert response.status_code == 200
    assert response.json()["result"] == pytest.approx(1e200)

    response = client.post("/vectors/unit_vector", json={"vector": {"x": 1e-200}})
    assert response.status_code == 200
    assert response.json()["result"] == pytest.approx({"x": 1.0, "y": 0.0, "z": 0.0})


def test_non_finite_scalar_result_is_422():
    response = client.post("/vectors/dot", json={
        "vector": {"x": 1e200},
        "others": [{"x": 1e200}],
    })
    assert response.status_code == 422
    assert "not finite" in response.json()["detail"]


def test_non_finite_vector_result_is_422():
    response = client.post("/vectors/scalar_mult", json={"vector": {"x": 1e200, "y": 1}, "factor": 1e200})
    assert response.status_code == 422


def test_result_precision_rounds_scalars_and_components(monkeypatch):
    monkeypatch.setattr(server.config, "result_precision", 3)
    response = client.post("/points/inner_angle_points", json={
        "points": [{"x": 0}, {"x": 1}, {"x": 0, "y": 1}],
    })
    assert response.json()["result"] == round(math.pi / 2, 3)

    response = client.post("/vectors/unit_vector", json={"vector": {"x": 1, "y": 1}})
    assert response.json()["result"] == {"x": 0.707, "y": 0.707, "z": 0.0}
