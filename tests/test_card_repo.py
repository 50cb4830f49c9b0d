import pytest

from nutrifit.card_repo import CardStore
from nutrifit.clients import Configured, Unconfigured
from nutrifit.db import create_all, init_store, normalize_database_url
from nutrifit.errors import StoreError
from nutrifit.schemas import CardType


@pytest.fixture
def store(tmp_path):
    state = init_store(f"sqlite:///{tmp_path / 'repo.db'}")
    create_all(state)
    return CardStore(state)


def _fit(title="Run", day="tuesday"):
    return {"title": title, "day": day, "time": "06:30", "exercise_type": "cardio", "duration": 30, "intensity": "moderate"}


def test_insert_get_list_delete(store):
    card_id = store.insert_card(CardType.FIT, _fit())
    store.insert_card(CardType.FIT, _fit("Swim", "thursday"))
    card = store.get_card(CardType.FIT, str(card_id))
    assert card["title"] == "Run"
    assert card["exercise_type"] == "cardio"
    assert card["muscle_groups"] is None
    assert [c["title"] for c in store.list_cards(CardType.FIT)] == ["Run", "Swim"]
    assert store.delete_card(CardType.FIT, card_id) == 1
    assert store.get_card(CardType.FIT, card_id) is None
    assert store.delete_card(CardType.FIT, card_id) == 0


def test_tables_are_separate(store):
    store.insert_card(CardType.NUTRI, {"title": "Salad", "day": "monday", "time": "12:00", "protein": 12})
    assert store.list_cards(CardType.FIT) == []
    assert store.get_card(CardType.RECOVERY, 1) is None
    assert store.count_cards(CardType.NUTRI) == 1


def test_uuid_ids_never_match(store):
    store.insert_card(CardType.FIT, _fit())
    uuid_id = "3f1c2a7e-5b0d-4c1e-9a8f-0123456789ab"
    assert store.get_card(CardType.FIT, uuid_id) is None
    assert store.delete_card(CardType.FIT, uuid_id) == 0


def test_fetch_dashboard(store):
    store.insert_card(CardType.NUTRI, {"title": "Salad", "day": "monday", "time": "12:00"})
    store.insert_card(CardType.FIT, _fit())
    store.insert_card(CardType.FIT, _fit("Swim"))
    data = store.fetch_dashboard()
    assert (data["nutri_count"], data["fit_count"], data["recovery_count"]) == (1, 2, 0)
    assert [c["title"] for c in data["fit_cards"]] == ["Run", "Swim"]
    assert data["recovery_cards"] == []


def test_unconfigured_store_raises_store_error():
    store = CardStore(Unconfigured("DATABASE_URL not set"))
    with pytest.raises(StoreError):
        store.fetch_dashboard()
    with pytest.raises(StoreError):
        store.insert_card(CardType.NUTRI, {"title": "x", "day": "monday", "time": "1"})


def test_init_store_tags():
    assert isinstance(init_store(None), Unconfigured)
    assert isinstance(init_store("sqlite://"), Configured)


def test_postgres_urls_use_psycopg3():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql+psycopg://u:p@h/db"
    assert normalize_database_url("postgresql://u:p@h/db") == "postgresql+psycopg://u:p@h/db"
    assert normalize_database_url("postgresql+psycopg://u:p@h/db") == "postgresql+psycopg://u:p@h/db"
    assert normalize_database_url("sqlite:///x.db") == "sqlite:///x.db"


def test_ids_past_integer_range_never_match(store):
    store.insert_card(CardType.FIT, _fit())
    assert store.get_card(CardType.FIT, "9" * 30) is None
    assert store.delete_card(CardType.FIT, str(2**63)) == 0
    assert store.count_cards(CardType.FIT) == 1
