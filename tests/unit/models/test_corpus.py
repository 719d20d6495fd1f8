"""Unit tests for the VitalArticles corpus."""

import pytest
from models import ALL_TOPICS, Candidate, VitalArticles


class TestVitalArticles:

    def test_levels(self, corpus):
        assert corpus.levels == 2

    def test_empty(self):
        assert VitalArticles().levels == 0

    def test_topics(self, corpus):
        assert corpus.topics(1) == ["Geography", "People"]

    def test_all_topics(self, corpus):
        assert corpus.all_topics() == ["Biology and health sciences", "Geography", "People"]

    @pytest.mark.parametrize("difficulty", [0, 3, -1])
    def test_level_out_of_range(self, corpus, difficulty):
        with pytest.raises(ValueError):
            corpus.level(difficulty)

    def test_candidates_all(self, corpus):
        assert corpus.candidates(1) == [
            Candidate(topic="Geography", answer="Paris"),
            Candidate(topic="People", answer="Ada Lovelace"),
        ]
        assert corpus.candidates(1, ALL_TOPICS) == corpus.candidates(1)

    def test_candidates_one_topic(self, corpus):
        answers = [c.answer for c in corpus.candidates(2, "Geography")]
        assert answers == ["Atlantis", "History of France", "Mercury"]

    def test_candidates_unknown_topic(self, corpus):
        assert corpus.candidates(1, "Mathematics") == []

    def test_validates_json_shape(self):
        corpus = VitalArticles.model_validate([{"Arts": ["Mona Lisa"]}])
        assert corpus.candidates(1) == [Candidate(topic="Arts", answer="Mona Lisa")]
