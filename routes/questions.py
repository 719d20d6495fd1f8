"""
Question UI and API routes.

Collaborators come from app.config so tests can swap them:
    CORPUS_REPOSITORY  repositories.CorpusRepository
    FETCH_TEXT         callable(title) -> article text or None
    SEEN_ANSWERS       set of answers already attempted this process
    SETTINGS           config.Settings
"""

import logging
from flask import current_app, jsonify, render_template, request

from models import ALL_TOPICS
from repositories import CorpusNotFound
from tossup import PacketBuilder, format_question
from . import questions_bp

logger = logging.getLogger(__name__)

MAX_COUNT = 20


def _load_corpus():
    return current_app.config["CORPUS_REPOSITORY"].load()


@questions_bp.route("/")
def index():
    """Question packet page."""
    settings = current_app.config["SETTINGS"]
    try:
        topics = _load_corpus().all_topics()
    except CorpusNotFound:
        topics = []
    return render_template("index.html",
                           topics=[ALL_TOPICS] + topics,
                           difficulties=range(1, settings.max_difficulty + 1),
                           max_count=MAX_COUNT)


@questions_bp.route("/api/questions")
def get_questions():
    """Generate a packet of questions."""
    settings = current_app.config["SETTINGS"]
    topic = request.args.get("topic", ALL_TOPICS)
    try:
        count = min(int(request.args.get("count", 5)), MAX_COUNT)
        difficulty = int(request.args.get("difficulty", 1))
    except ValueError:
        return jsonify({"error": "count and difficulty must be integers"}), 400
    if count < 1:
        return jsonify({"error": "count must be positive"}), 400

    try:
        corpus = _load_corpus()
    except CorpusNotFound as e:
        logger.error("[WEB] %s", e)
        return jsonify({"error": "No corpus available - run `python cli.py crawl` first"}), 503

    if not 1 <= difficulty <= corpus.levels:
        return jsonify({"error": f"difficulty must be between 1 and {corpus.levels}"}), 400

    builder = PacketBuilder(
        corpus,
        current_app.config["FETCH_TEXT"],
        attempts=settings.attempts_per_question,
        seen=current_app.config["SEEN_ANSWERS"],
    )
    questions = builder.build(count, difficulty, topic)
    return jsonify({
        "questions": [
            {
                "topic": q.topic_label,
                "answer": q.display_answer,
                "html": format_question(q),
            }
            for q in questions
        ]
    })


@questions_bp.route("/api/reset", methods=["POST"])
def reset_seen():
    """Forget which answers have been used."""
    seen = current_app.config["SEEN_ANSWERS"]
    cleared = len(seen)
    seen.clear()
    return jsonify({"cleared": cleared})
