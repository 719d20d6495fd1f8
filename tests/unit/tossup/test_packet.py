"""Unit tests for the packet builder."""

import logging
import pytest

from models import Question, Topic
from sources import SourceError
from tossup import ArticleNotFound, PacketBuilder, should_skip


class RecordingGenerator:
    """generate_question stand-in that records calls."""

    def __init__(self, fail=()):
        self.calls = []
        self.fail = dict(fail)

    def __call__(self, topic, answer, fetch_text, rng=None):
        self.calls.append((topic, answer))
        if answer in self.fail:
            raise self.fail[answer]
        return Question.for_answer(topic, answer, ["A hint about it.", "For 10 points: <em>this</em>."])


class TestShouldSkip:

    @pytest.mark.parametrize("answer", [
        "List of sovereign states and dependent territories",
        "1984",
        "2008 financial crisis",
        "History of France",
        "Cinema of Japan",
        "Felidae",
    ])
    def test_skipped(self, answer):
        assert should_skip(answer)

    @pytest.mark.parametrize("answer", ["Paris", "Ada Lovelace", "Algae bloom", "World War II", "Mae"])
    def test_kept(self, answer):
        assert not should_skip(answer)


class TestAttempt:

    def test_success(self, corpus, fake_fetch, rng):
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, rng=rng, generate=generate)
        question = builder.attempt("Geography", "Paris")
        assert question.display_answer == "Paris"
        assert generate.calls == [("Geography", "Paris")]

    def test_seen_answer_is_not_retried(self, corpus, fake_fetch):
        generate = RecordingGenerator(fail={"Atlantis": ArticleNotFound("Atlantis")})
        builder = PacketBuilder(corpus, fake_fetch, generate=generate)
        assert builder.attempt("Geography", "Atlantis") is None
        assert builder.attempt("Geography", "Atlantis") is None
        assert len(generate.calls) == 1
        assert "Atlantis" in builder.seen

    def test_skip_still_marks_seen(self, corpus, fake_fetch):
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, generate=generate)
        assert builder.attempt("Biology and health sciences", "Felidae") is None
        assert generate.calls == []
        assert "Felidae" in builder.seen

    def test_unknown_topic_label_is_passed_through(self, corpus, fake_fetch):
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, generate=generate)
        question = builder.attempt("Music", "Jazz")
        assert generate.calls == [("Music", "Jazz")]
        assert question.topic is Topic.OTHER
        assert question.topic_label == "Music"

    def test_question_error_is_logged(self, corpus, fake_fetch, caplog):
        builder = PacketBuilder(corpus, fake_fetch)
        with caplog.at_level(logging.WARNING, logger="tossup.packet"):
            assert builder.attempt("Geography", "Mercury") is None
        assert "DisambiguationPage for Mercury" in caplog.text

    def test_source_error_is_logged(self, corpus, fake_fetch, caplog):
        generate = RecordingGenerator(fail={"Paris": SourceError("timed out")})
        builder = PacketBuilder(corpus, fake_fetch, generate=generate)
        with caplog.at_level(logging.WARNING, logger="tossup.packet"):
            assert builder.attempt("Geography", "Paris") is None
        assert "Fetch failed for Paris" in caplog.text

    def test_shared_seen_set(self, corpus, fake_fetch):
        seen = {"Paris"}
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, seen=seen, generate=generate)
        assert builder.attempt("Geography", "Paris") is None
        builder.attempt("People", "Ada Lovelace")
        assert seen == {"Paris", "Ada Lovelace"}


class TestBuild:

    def test_attempts_must_be_positive(self, corpus, fake_fetch):
        with pytest.raises(ValueError):
            PacketBuilder(corpus, fake_fetch, attempts=0)

    def test_builds_real_questions(self, corpus, fake_fetch, rng):
        builder = PacketBuilder(corpus, fake_fetch, rng=rng)
        questions = builder.build(5, 1)
        assert sorted(q.display_answer for q in questions) == ["Ada Lovelace", "Paris"]

    def test_topic_filter(self, corpus, fake_fetch, rng):
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, rng=rng, generate=generate)
        questions = builder.build(1, 1, "People")
        assert [q.display_answer for q in questions] == ["Ada Lovelace"]

    def test_count_is_an_upper_bound(self, corpus, fake_fetch, rng):
        generate = RecordingGenerator()
        builder = PacketBuilder(corpus, fake_fetch, rng=rng, generate=generate)
        assert len(builder.build(1, 1)) == 1

    def test_all_candidates_fail(self, corpus, fake_fetch, rng):
        builder = PacketBuilder(corpus, fake_fetch, rng=rng)
        assert builder.build(3, 2) == []

    def test_attempt_budget_per_slot(self, corpus, fake_fetch, rng):
        generate = RecordingGenerator(fail={
            "Atlantis": ArticleNotFound("Atlantis"),
            "Mercury": ArticleNotFound("Mercury"),
        })
        builder = PacketBuilder(corpus, fake_fetch, attempts=2, rng=rng, generate=generate)
        assert builder.build(4, 2, "Geography") == []
        # Each candidate is tried at most once however many slots there are
        assert len(generate.calls) <= 2

    def test_no_candidates_for_topic(self, corpus, fake_fetch, rng, caplog):
        builder = PacketBuilder(corpus, fake_fetch, rng=rng)
        with caplog.at_level(logging.WARNING, logger="tossup.packet"):
            assert builder.build(2, 1, "Mathematics") == []
        assert "No candidates for Mathematics" in caplog.text

    def test_bad_difficulty(self, corpus, fake_fetch):
        builder = PacketBuilder(corpus, fake_fetch)
        with pytest.raises(ValueError):
            builder.build(1, 3)
