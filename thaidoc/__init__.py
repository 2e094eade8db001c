from __future__ import annotations

import logging
import os

from flask import Flask
from dotenv import load_dotenv

__version__ = "0.1.0"


def create_app(config: dict | None = None) -> Flask:
    load_dotenv()

    app = Flask(__name__, template_folder="templates")

    app.config.update(
        THAIDOC_LOG_LEVEL=os.getenv("THAIDOC_LOG_LEVEL", "INFO"),
        THAIDOC_BAHT_CACHE_SIZE=int(os.getenv("THAIDOC_BAHT_CACHE_SIZE", "1024")),
    )
    if config:
        app.config.update(config)

    level = str(app.config["THAIDOC_LOG_LEVEL"]).upper()
    logging.getLogger(__name__).setLevel(level)
    app.logger.setLevel(level)

    from .utils import (
        fmt_money,
        guard,
        keep_together,
        make_cached_baht_text,
        thai_baht_text,
        thai_words,
    )

    cache_size = app.config["THAIDOC_BAHT_CACHE_SIZE"]
    baht_text = make_cached_baht_text(cache_size) if cache_size > 0 else thai_baht_text
    app.extensions["thaidoc"] = {"baht_text": baht_text}

    # ✅ Thai amount-to-text + line-break guard for Jinja
    app.jinja_env.globals["thai_baht_text"] = baht_text
    app.jinja_env.filters["thai_baht_text"] = baht_text
    app.jinja_env.filters["thai_baht_text_paren"] = lambda v: f"({baht_text(v)})"
    app.jinja_env.filters["thai_words"] = thai_words
    app.jinja_env.filters["thai_guard"] = guard
    app.jinja_env.filters["keep_together"] = keep_together
    app.jinja_env.filters["money"] = fmt_money

    return app
