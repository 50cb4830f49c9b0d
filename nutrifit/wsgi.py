"""Production entry point: ``gunicorn nutrifit.wsgi:app``."""
from __future__ import annotations

from pathlib import Path

from whitenoise import WhiteNoise

from nutrifit.app_factory import create_app

STATIC_DIR = Path(__file__).resolve().parent / "static"

flask_app = create_app()
# Stylesheets and scripts are served from memory ahead of Flask routing
app = WhiteNoise(flask_app, root=str(STATIC_DIR), prefix="static/")
