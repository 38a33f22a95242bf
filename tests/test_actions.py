"""Tests for the action ticket endpoints."""
import re


def test_list_actions(client):
    response = client.get("/actions")
    assert response.status_code == 200
    data = response.json()
    assert [t["action_ticket_id"] for t in data] == [1, 2, 3, 4]
    assert data[0] == {
        "action_ticket_id": 1,
        "comments": None,
        "issue": "Spencer missed his 2nd weekly session, may be dropped?",
        "pending": True,
        "resolved": False,
        "strike": True,
        "subject_id": "10",
        "submitted_by": "7",
    }
    assert data[1]["strike"] is False


def test_get_action(client):
    response = client.get("/actions/4")
    assert response.status_code == 200
    data = response.json()
    assert data["issue"] == "Has not turned in their assignments."
    assert data["submitted_by"] == "9"
    assert data["subject_id"] == "12"


def test_get_unknown_action(client):
    response = client.get("/actions/987654321")
    assert response.status_code == 404
    assert re.search(r"action ticket id not found", response.json()["message"], re.I)


def test_create_action(client):
    new_action = {"submitted_by": "7", "subject_id": "10", "issue": "Test Issue"}
    response = client.post("/actions", json=new_action)
    assert response.status_code == 201
    data = response.json()
    assert "success" in data["message"].lower()
    for key, value in new_action.items():
        assert data["action"][key] == value
    assert data["action"]["pending"] is True
    assert data["action"]["resolved"] is False


def test_create_action_missing_fields(client):
    cases = [
        ({"subject_id": "10", "issue": "x"}, "submitted_by is required"),
        ({"submitted_by": "7", "issue": "x"}, "subject_id is required"),
        ({"submitted_by": "7", "subject_id": "10"}, "issue is required"),
    ]
    for payload, message in cases:
        response = client.post("/actions", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == message


def test_create_action_unknown_subject(client):
    response = client.post("/actions", json={"submitted_by": "7", "subject_id": "ghost", "issue": "x"})
    assert response.status_code == 400
    assert response.json()["message"] == "subject_id must reference an existing profile"


def test_update_action(client):
    changes = {"issue": "Updated Test Issue", "pending": False, "resolved": True}
    response = client.put("/actions/4", json=changes)
    assert response.status_code == 200
    assert response.json()["changes"] == changes

    ticket = client.get("/actions/4").json()
    assert ticket["issue"] == "Updated Test Issue"
    assert ticket["pending"] is False
    assert ticket["resolved"] is True
    # not part of the update
    assert ticket["strike"] is True


def test_update_action_comments(client):
    response = client.put("/actions/2", json={"comments": "Reassigned to Marcus"})
    assert response.status_code == 200
    assert client.get("/actions/2").json()["comments"] == "Reassigned to Marcus"


def test_update_action_rejects_non_boolean_flags(client):
    response = client.put("/actions/1", json={"resolved": "yes"})
    assert response.status_code == 400
    assert response.json()["message"] == "resolved must be a boolean"


def test_update_unknown_action(client):
    response = client.put("/actions/999", json={"resolved": True})
    assert response.status_code == 404


def test_delete_action(client):
    response = client.delete("/actions/3")
    assert response.status_code == 200
    assert response.json()["message"] == "action ticket deleted"
    assert client.get("/actions/3").status_code == 404
