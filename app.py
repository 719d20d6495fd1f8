#!/usr/bin/env python3
"""
Tossup Web Interface

Flask app for generating question packets in the browser.
"""

from flask import Flask

from config import load_settings, setup_logging
from repositories import get_repository
from routes import questions_bp
from sources import WikipediaClient

settings = load_settings()

app = Flask(__name__, template_folder="templates_html")
app.config.update(
    SETTINGS=settings,
    CORPUS_REPOSITORY=get_repository(settings.corpus_path),
    FETCH_TEXT=WikipediaClient(settings).fetch_article_text,
    SEEN_ANSWERS=set(),
)
app.register_blueprint(questions_bp)


if __name__ == "__main__":
    setup_logging(settings.log_level)
    print("\n" + "="*60)
    print("  Tossup Generator Web Interface")
    print("="*60)
    print(f"  Open http://localhost:{settings.web_port} in your browser")
    print("="*60 + "\n")
    app.run(debug=True, port=settings.web_port)
