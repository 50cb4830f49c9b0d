import pytest
from pydantic import ValidationError as SchemaError

from nutrifit.schemas import ApiChat, card_type_schema
from nutrifit.validation import describe_errors


def test_describe_errors_is_readable_and_does_not_echo_input():
    with pytest.raises(SchemaError) as ei:
        ApiChat.model_validate({"message": "x" * 2001})
    lines = describe_errors(ei.value)
    assert len(lines) == 1
    assert lines[0].startswith('"message"')
    assert "x" * 50 not in lines[0]
    assert "https://" not in lines[0]


def test_describe_errors_reports_missing_fields():
    with pytest.raises(SchemaError) as ei:
        ApiChat.model_validate({})
    assert describe_errors(ei.value) == ['"message" is required']


def test_describe_errors_uses_label_for_bare_values():
    with pytest.raises(SchemaError) as ei:
        card_type_schema.validate_python("users")
    (line,) = describe_errors(ei.value, "type")
    assert line.startswith('"type" ')


def test_json_body_failure_lists_every_violation(client):
    r = client.post("/api/ai/workout-plan", json={"daysPerWeek": 9, "duration": 1})
    assert r.status_code == 400
    body = r.get_json()
    assert body["error"] == "Validation failed"
    assert '"goal" is required' in body["message"]
    assert body["message"].count("; ") == 2


def test_json_body_failure_has_no_partial_value(client):
    r = client.post("/api/ai/chat", json={"message": "", "admin": True})
    assert r.status_code == 400
    assert set(r.get_json()) == {"error", "message"}


def test_form_failure_returns_static_html(client):
    r = client.post("/home", data={"firstName": "R2D2", "lastName": "Droid"})
    assert r.status_code == 400
    assert r.mimetype == "text/html"
    html = r.get_data(as_text=True)
    assert "Invalid input" in html
    assert "Go back" in html
    assert "R2D2" not in html


def test_param_failure_returns_plain_text(client):
    r = client.get("/details/users/1")
    assert r.status_code == 400
    assert r.mimetype == "text/plain"
    assert r.get_data(as_text=True).startswith('"type"')


def test_param_failure_lists_both_params(client):
    r = client.post("/delete/users/abc")
    assert r.status_code == 400
    text = r.get_data(as_text=True)
    assert '"type"' in text and '"id"' in text


def test_query_failure_is_json(client):
    r = client.get("/api/ninjas/nutrition")
    assert r.status_code == 400
    assert r.get_json() == {"error": "Validation failed", "message": '"query" is required'}
