from typing import Dict, List

from quizbroker.models import Quiz
from .identifiers import generate_id

DEFAULT_TITLE = 'Untitled Quiz'
DEFAULT_AUTHOR = 'Anonymous'


class QuizCatalog:
    """Append-only list of published quizzes, kept in publication order."""

    def __init__(self, id_length: int = 6):
        self.id_length = id_length
        self._quizzes: List[Quiz] = []
        self._by_id: Dict[str, Quiz] = {}

    def __len__(self) -> int:
        return len(self._quizzes)

    def list(self) -> List[Quiz]:
        return list(self._quizzes)

    def publish(self, questions, title=None, author=None) -> Quiz:
        # questionCount is derived from the data, never taken from the caller
        if not isinstance(questions, list):
            questions = []
        quiz = Quiz(
            id=generate_id(taken=self._by_id.__contains__, length=self.id_length),
            title=title or DEFAULT_TITLE,
            author=author or DEFAULT_AUTHOR,
            data=questions,
        )
        self._quizzes.append(quiz)
        self._by_id[quiz.id] = quiz
        return quiz
