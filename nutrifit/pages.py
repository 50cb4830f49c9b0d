"""Server-rendered pages: sign-in, home, calendar, cards and Ask Berry."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, g, redirect, render_template, session

from .assistant import get_assistant
from .card_repo import empty_dashboard, get_store
from .errors import AssistantServiceError, StoreError
from .rate_limit import limit
from .schemas import CARD_SCHEMAS, DAYS, AskBerry, CardType, SignIn
from .validation import validate_body, validate_params

log = logging.getLogger(__name__)

bp = Blueprint("pages", __name__)

BERRY_UNAVAILABLE = "Sorry, Berry is taking a break. Please try again later."

# POST path -> card type inserted by that form
CARD_SUBMIT_ROUTES = (
    ("/calendar", CardType.NUTRI),
    ("/calendar2", CardType.FIT),
    ("/calendar3", CardType.RECOVERY),
)


def _plain(text: str) -> Response:
    return Response(text, mimetype="text/plain")


def _current_user() -> dict[str, str] | None:
    if "first_name" not in session:
        return None
    return {"first_name": session["first_name"], "last_name": session.get("last_name", "")}


def _render_calendar():
    try:
        data = get_store().fetch_dashboard()
    except StoreError:
        log.exception("Calendar data unavailable")
        data = empty_dashboard()
    return render_template("calendar.html", page_css="calendar.css", days=DAYS, **data)


@bp.get("/")
def signin():
    return render_template("signin.html", page_css="signin.css")


@bp.post("/home")
@limit("post")
@validate_body(SignIn, html_response=True)
def home_signin():
    body: SignIn = g.validated_body
    session["first_name"] = body.first_name
    session["last_name"] = body.last_name
    return render_template("index.html", page_css="index.css", data=_current_user())


@bp.get("/home")
def home():
    return render_template("index.html", page_css="index.css", data=_current_user())


@bp.get("/calendar")
def calendar():
    return _render_calendar()


def _card_submit_view(card_type: CardType):
    @limit("post")
    @validate_body(CARD_SCHEMAS[card_type], html_response=True)
    def submit():
        values: dict[str, Any] = g.validated_body.model_dump()
        try:
            get_store().insert_card(card_type, values)
        except StoreError:
            log.exception("Card insert failed type=%s", card_type.value)
        return _render_calendar()

    return submit


for _path, _card_type in CARD_SUBMIT_ROUTES:
    bp.add_url_rule(
        _path,
        endpoint=f"submit_{_card_type.name.lower()}",
        view_func=_card_submit_view(_card_type),
        methods=["POST"],
    )


@bp.get("/details/<card_type>/<card_id>")
@validate_params()
def card_details(card_type: CardType, card_id: str):
    try:
        card = get_store().get_card(card_type, card_id)
    except StoreError:
        log.exception("Card lookup failed type=%s", card_type.value)
        card = None
    if card is None:
        return _plain("Error finding that card.")
    return render_template("card_details.html", page_css="card-details.css", card=card, type=card_type.value)


@bp.post("/delete/<card_type>/<card_id>")
@limit("post")
@validate_params()
def delete_card(card_type: CardType, card_id: str):
    try:
        get_store().delete_card(card_type, card_id)
    except StoreError:
        log.exception("Card delete failed type=%s", card_type.value)
        return _plain("Error deleting card. Please try again.")
    return redirect("/calendar")


@bp.get("/create/nutricard")
def create_nutricard():
    return render_template("create_nutricard.html", page_css="create-card.css", days=DAYS)


@bp.get("/create/fitcard")
def create_fitcard():
    return render_template("create_fitcard.html", page_css="create-card.css", days=DAYS)


@bp.get("/create/recoverycard")
def create_recoverycard():
    return render_template("create_recoverycard.html", page_css="create-card.css", days=DAYS)


@bp.get("/contact")
def contact():
    return render_template("about_us.html", page_css="about-us.css")


@bp.get("/ask-berry")
def ask_berry():
    return render_template("ask_berry.html", page_css="ask-berry.css", response=None, user_prompt=None)


@bp.post("/ask-berry")
@limit("ai")
@validate_body(AskBerry, html_response=True)
def ask_berry_submit():
    prompt = g.validated_body.prompt
    try:
        reply = get_assistant().chat(prompt)
    except AssistantServiceError:
        reply = BERRY_UNAVAILABLE
    return render_template("ask_berry.html", page_css="ask-berry.css", response=reply, user_prompt=prompt)


__all__ = ["bp"]
