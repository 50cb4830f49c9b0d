"""Development runner.
Usage: python run.py  (reads .env if present)
Set AUTO_CREATE_TABLES=1 to create the card tables on startup (development only).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from nutrifit import create_app

load_dotenv()

app = create_app({"AUTO_CREATE_TABLES": os.getenv("AUTO_CREATE_TABLES", "0").lower() in ("1", "true", "yes")})

if __name__ == "__main__":  # pragma: no cover
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    app.run(debug=True, host=host, port=port)
