"""
Typed failures for a single (topic, answer) generation attempt.

Every failure is expected: it takes one answer out of play and the caller
moves on to another candidate. Nothing here is retried by the pipeline.
"""


class QuestionError(Exception):
    """Base class for all attempt failures."""
    kind = "QuestionError"

    def __init__(self, answer: str, detail: str = ""):
        self.answer = answer
        self.detail = detail
        message = f"{self.kind} for {answer}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ArticleNotFound(QuestionError):
    kind = "ArticleNotFound"


class DisambiguationPage(QuestionError):
    kind = "DisambiguationPage"


class TaxonomicName(QuestionError):
    kind = "TaxonomicName"


class InvalidLeadSentence(QuestionError):
    kind = "InvalidLeadSentence"


class InsufficientContent(QuestionError):
    kind = "InsufficientContent"


class NoBiographicalPredicate(QuestionError):
    kind = "NoBiographicalPredicate"
