from __future__ import annotations

import logging
from typing import Any

from flask import current_app
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from .clients import ClientState, Unconfigured
from .db import new_session
from .errors import StoreError
from .models import Base, FitCard, NutriCard, RecoveryCard
from .schemas import CardType

log = logging.getLogger(__name__)

EXTENSION_KEY = "nutrifit.store"
MAX_ROW_ID = 2**63 - 1

CARD_MODELS: dict[CardType, type[Base]] = {
    CardType.NUTRI: NutriCard,
    CardType.FIT: FitCard,
    CardType.RECOVERY: RecoveryCard,
}


def _serialize(row: Base) -> dict[str, Any]:
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


def _row_id(card_id: str | int) -> int | None:
    # Ids are integers; UUID-shaped ids pass validation but never match a row
    text = str(card_id)
    if not text.isdigit():
        return None
    value = int(text)
    # Past the signed 64-bit range no INTEGER key can match
    return value if value <= MAX_ROW_ID else None


def empty_dashboard() -> dict[str, Any]:
    return {
        "nutri_cards": None,
        "fit_cards": None,
        "recovery_cards": None,
        "nutri_count": None,
        "fit_count": None,
        "recovery_count": None,
    }


class CardStore:
    """Card persistence over the configured SQLAlchemy session factory."""

    def __init__(self, state: ClientState):
        self.state = state

    def _session(self):
        if isinstance(self.state, Unconfigured):
            raise StoreError(f"Card store not configured: {self.state.reason}")
        return new_session(self.state)

    def insert_card(self, card_type: CardType, values: dict[str, Any]) -> int:
        model = CARD_MODELS[CardType(card_type)]
        db = self._session()
        try:
            row = model(**values)
            db.add(row)
            db.commit()
            db.refresh(row)
            log.info("Inserted card type=%s id=%s", model.__tablename__, row.id)
            return row.id
        except SQLAlchemyError as exc:
            db.rollback()
            raise StoreError(f"insert into {model.__tablename__} failed") from exc
        finally:
            db.close()

    def list_cards(self, card_type: CardType) -> list[dict[str, Any]]:
        model = CARD_MODELS[CardType(card_type)]
        db = self._session()
        try:
            rows = db.execute(select(model).order_by(model.id)).scalars().all()
            return [_serialize(r) for r in rows]
        except SQLAlchemyError as exc:
            raise StoreError(f"select from {model.__tablename__} failed") from exc
        finally:
            db.close()

    def get_card(self, card_type: CardType, card_id: str | int) -> dict[str, Any] | None:
        model = CARD_MODELS[CardType(card_type)]
        row_id = _row_id(card_id)
        if row_id is None:
            return None
        db = self._session()
        try:
            row = db.get(model, row_id)
            return _serialize(row) if row is not None else None
        except SQLAlchemyError as exc:
            raise StoreError(f"lookup in {model.__tablename__} failed") from exc
        finally:
            db.close()

    def delete_card(self, card_type: CardType, card_id: str | int) -> int:
        """Delete by id; returns the number of rows removed (0 when nothing matched)."""
        model = CARD_MODELS[CardType(card_type)]
        row_id = _row_id(card_id)
        if row_id is None:
            return 0
        db = self._session()
        try:
            row = db.get(model, row_id)
            if row is None:
                return 0
            db.delete(row)
            db.commit()
            log.info("Deleted card type=%s id=%s", model.__tablename__, row_id)
            return 1
        except SQLAlchemyError as exc:
            db.rollback()
            raise StoreError(f"delete from {model.__tablename__} failed") from exc
        finally:
            db.close()

    def count_cards(self, card_type: CardType) -> int:
        model = CARD_MODELS[CardType(card_type)]
        db = self._session()
        try:
            return int(db.execute(select(func.count()).select_from(model)).scalar_one())
        except SQLAlchemyError as exc:
            raise StoreError(f"count on {model.__tablename__} failed") from exc
        finally:
            db.close()

    def fetch_dashboard(self) -> dict[str, Any]:
        """All cards of every type plus per-type counts, in one session."""
        db = self._session()
        try:
            out: dict[str, Any] = {}
            for card_type, prefix in (
                (CardType.NUTRI, "nutri"),
                (CardType.FIT, "fit"),
                (CardType.RECOVERY, "recovery"),
            ):
                model = CARD_MODELS[card_type]
                rows = db.execute(select(model).order_by(model.id)).scalars().all()
                out[f"{prefix}_cards"] = [_serialize(r) for r in rows]
                out[f"{prefix}_count"] = len(rows)
            return out
        except SQLAlchemyError as exc:
            raise StoreError("dashboard fetch failed") from exc
        finally:
            db.close()


def get_store() -> CardStore:
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["CARD_MODELS", "CardStore", "empty_dashboard", "get_store"]
