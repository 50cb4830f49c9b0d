from nutrifit.clients import Configured
from nutrifit.schemas import DAYS

NUTRI_FORM = {"title": "Overnight oats", "day": "monday", "time": "08:00", "carbs": "", "protein": "20", "fat": "5"}
FIT_FORM = {
    "title": "Leg day",
    "day": "wednesday",
    "time": "18:00",
    "exerciseType": "strength",
    "duration": "45",
    "intensity": "high",
    "muscleGroups": "quads, glutes",
}
RECOVERY_FORM = {
    "title": "Evening stretch",
    "day": "sunday",
    "time": "21:00",
    "exerciseType": "mobility",
    "duration": "15",
    "intensity": "low",
    "bodyPart": "hips",
}


def test_signin_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'name="firstName"' in r.get_data(as_text=True)


def test_signin_keeps_name_in_session(client):
    r = client.post("/home", data={"firstName": " Ada ", "lastName": "Lovelace"})
    assert r.status_code == 200
    assert "Hi Ada Lovelace!" in r.get_data(as_text=True)
    assert "Hi Ada Lovelace!" in client.get("/home").get_data(as_text=True)


def test_failed_signin_leaves_session_untouched(client):
    client.post("/home", data={"firstName": "Ada", "lastName": "Lovelace"})
    assert client.post("/home", data={"firstName": "X", "lastName": "Y"}).status_code == 400
    assert "Hi Ada Lovelace!" in client.get("/home").get_data(as_text=True)


def test_sessions_are_per_client(app):
    first = app.test_client()
    second = app.test_client()
    first.post("/home", data={"firstName": "Ada", "lastName": "Lovelace"})
    assert "Ada" not in second.get("/home").get_data(as_text=True)


def test_empty_calendar(client):
    r = client.get("/calendar")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    for day in DAYS:
        assert day.capitalize() in html
    assert "Nutri cards: <strong>0</strong>" in html


def test_each_card_form_inserts_into_its_table(client):
    client.post("/calendar", data=NUTRI_FORM)
    client.post("/calendar2", data=FIT_FORM)
    r = client.post("/calendar3", data=RECOVERY_FORM)
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Overnight oats" in html and "Leg day" in html and "Evening stretch" in html
    assert "Nutri cards: <strong>1</strong>" in html
    assert "Fit cards: <strong>1</strong>" in html
    assert "Recovery cards: <strong>1</strong>" in html
    assert "/details/fit-card/1" in html


def test_invalid_card_form_is_400_html(client):
    r = client.post("/calendar2", data={**FIT_FORM, "duration": "0"})
    assert r.status_code == 400
    assert "Invalid input" in r.get_data(as_text=True)
    assert "Fit cards: <strong>0</strong>" in client.get("/calendar").get_data(as_text=True)


def test_client_supplied_id_is_ignored(client):
    client.post("/calendar", data={**NUTRI_FORM, "id": "999"})
    assert client.get("/details/nutri-card/999").get_data(as_text=True) == "Error finding that card."
    r = client.get("/details/nutri-card/1")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Overnight oats" in html
    assert "Protein" in html


def test_details_with_uuid_finds_nothing(client):
    r = client.get("/details/recovery-card/3f1c2a7e-5b0d-4c1e-9a8f-0123456789ab")
    assert r.status_code == 200
    assert r.get_data(as_text=True) == "Error finding that card."


def test_delete_redirects_to_calendar(client):
    client.post("/calendar2", data=FIT_FORM)
    r = client.post("/delete/fit-card/1")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/calendar")
    assert "Leg day" not in client.get("/calendar").get_data(as_text=True)


def test_unconfigured_store_degrades(make_app):
    client = make_app(database_url=None).test_client()
    r = client.get("/calendar")
    assert r.status_code == 200
    assert "Nutri cards: <strong>-</strong>" in r.get_data(as_text=True)
    assert client.post("/calendar", data=NUTRI_FORM).status_code == 200
    assert client.get("/details/nutri-card/1").get_data(as_text=True) == "Error finding that card."
    r = client.post("/delete/nutri-card/1")
    assert r.get_data(as_text=True) == "Error deleting card. Please try again."


def test_static_pages(client):
    for path in ("/create/nutricard", "/create/fitcard", "/create/recoverycard", "/contact", "/ask-berry"):
        assert client.get(path).status_code == 200, path
    assert 'action="/calendar3"' in client.get("/create/recoverycard").get_data(as_text=True)


def test_ask_berry_without_key(client):
    r = client.post("/ask-berry", data={"prompt": "How do I start running?"})
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "How do I start running?" in html
    assert "configure your OpenAI API key" in html


def test_ask_berry_reply(client, use_assistant, fake_openai):
    use_assistant(Configured(fake_openai))
    r = client.post("/ask-berry", data={"prompt": "Hi Berry"})
    assert "Berry says hi" in r.get_data(as_text=True)


def test_ask_berry_outage_message(client, use_assistant, fake_openai):
    fake_openai.chat.completions.create.side_effect = ConnectionError("down")
    use_assistant(Configured(fake_openai))
    r = client.post("/ask-berry", data={"prompt": "Hi Berry"})
    assert r.status_code == 200
    assert "Sorry, Berry is taking a break. Please try again later." in r.get_data(as_text=True)


def test_ask_berry_rejects_long_prompt(client):
    r = client.post("/ask-berry", data={"prompt": "x" * 2001})
    assert r.status_code == 400
    assert "Invalid input" in r.get_data(as_text=True)


def test_oversized_numeric_id_is_a_miss(client):
    huge = "9" * 30
    r = client.get(f"/details/nutri-card/{huge}")
    assert r.status_code == 200
    assert r.get_data(as_text=True) == "Error finding that card."
    r = client.post(f"/delete/nutri-card/{huge}")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/calendar")
