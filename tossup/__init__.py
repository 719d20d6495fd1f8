"""
Tossup - turn an encyclopedia article into a gated-disclosure trivia question

Hints run from obscure to obvious and every mention of the answer is masked.

Modules:
- normalize: strip trailing sections, headings and parentheticals
- segment: sentence splitting and structural validity
- rules: per-topic alternates, redaction and revealer behaviour
- redact: mask every answer form in every sentence
- quality: keep only self-contained, spoiler-free hints
- assemble: revealer construction and the hint length budget
- render: HTML for a finished question
- pipeline: one (topic, answer) attempt, start to finish
- packet: the caller - candidate picking, skips and retries
"""

from .errors import (
    QuestionError,
    ArticleNotFound,
    DisambiguationPage,
    TaxonomicName,
    InvalidLeadSentence,
    InsufficientContent,
    NoBiographicalPredicate,
)
from .normalize import normalize_article
from .segment import split_sentences, filter_valid
from .rules import TopicRules, rules_for, derive_alternates
from .redact import redact_sentences
from .quality import filter_quality
from .assemble import HintSet, build_revealer, assemble_hints, LEAD_IN
from .render import format_question
from .pipeline import screen_article, question_from_text, generate_question
from .packet import PacketBuilder, should_skip

__all__ = [
    # errors
    'QuestionError',
    'ArticleNotFound',
    'DisambiguationPage',
    'TaxonomicName',
    'InvalidLeadSentence',
    'InsufficientContent',
    'NoBiographicalPredicate',
    # stages
    'normalize_article',
    'split_sentences',
    'filter_valid',
    'TopicRules',
    'rules_for',
    'derive_alternates',
    'redact_sentences',
    'filter_quality',
    'HintSet',
    'build_revealer',
    'assemble_hints',
    'LEAD_IN',
    'format_question',
    # pipeline
    'screen_article',
    'question_from_text',
    'generate_question',
    # caller
    'PacketBuilder',
    'should_skip',
]
