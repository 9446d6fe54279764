"""
Exam session: generated questions, the answers given so far, and the finished flag.
ExamSession is immutable; every transition returns the next session.
"""
import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

from quizgen.errors import InactiveSessionError, InvalidIndexError
from quizgen.question_bank import GeneratedQuestion, QuestionBank
from quizgen.sampler import RandomSource, generate_questions

logger = logging.getLogger(__name__)

UNSTARTED = "unstarted"
ACTIVE = "active"
FINISHED = "finished"


@dataclass(frozen=True)
class AnswerRecord:
    question_index: int
    selected_key: str


@dataclass(frozen=True)
class ExamSession:
    """
    One quiz attempt.

    States:
        unstarted: no questions
        active: questions present, answers can change
        finished: answers frozen, ready for scoring
    """
    questions: Tuple[GeneratedQuestion, ...] = ()
    answers: Tuple[AnswerRecord, ...] = ()
    finished: bool = False

    @classmethod
    def unstarted(cls) -> "ExamSession":
        return cls()

    @property
    def state(self) -> str:
        if not self.questions:
            return UNSTARTED
        return FINISHED if self.finished else ACTIVE

    @property
    def is_active(self) -> bool:
        return self.state == ACTIVE

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def __len__(self) -> int:
        return len(self.questions)

    def check_index(self, question_index: int) -> None:
        """Raise InvalidIndexError unless question_index points at a question of this exam."""
        if isinstance(question_index, bool) or not isinstance(question_index, int) \
                or not 0 <= question_index < len(self.questions):
            raise InvalidIndexError(question_index, len(self.questions))

    def answer_for(self, question_index: int) -> Optional[str]:
        """Selected key for a question, or None if it has not been answered."""
        for record in self.answers:
            if record.question_index == question_index:
                return record.selected_key
        return None

    def unanswered_indices(self) -> List[int]:
        answered = {a.question_index for a in self.answers}
        return [i for i in range(len(self.questions)) if i not in answered]

    # ----- transitions -----

    def generate(
        self,
        bank: QuestionBank,
        categories: Iterable[str],
        count_per_category: int,
        rng: Optional[RandomSource] = None,
    ) -> "ExamSession":
        """Start over with a fresh question set. Allowed from any state; answers are discarded."""
        questions = generate_questions(bank, categories, count_per_category, rng)
        session = ExamSession(questions=tuple(questions))
        logger.info(f"Exam session {session.state}: {len(questions)} questions")
        return session

    def record_answer(self, question_index: int, selected_key: str, strict: bool = False) -> "ExamSession":
        """
        Set the answer for one question, replacing any earlier choice for it.

        Outside the active state this returns the session unchanged, or raises
        InactiveSessionError when strict is set. A bad index raises InvalidIndexError.
        """
        if not self.is_active:
            if strict:
                raise InactiveSessionError(f"Cannot record an answer while the session is {self.state}")
            logger.debug(f"Ignored answer for Q{question_index}: session is {self.state}")
            return self
        self.check_index(question_index)

        record = AnswerRecord(question_index, selected_key)
        answers = list(self.answers)
        for i, existing in enumerate(answers):
            if existing.question_index == question_index:
                answers[i] = record
                break
        else:
            answers.append(record)

        logger.debug(f"Answer recorded: Q={question_index}, key={selected_key!r}")
        return replace(self, answers=tuple(answers))

    def finish(self) -> "ExamSession":
        """Freeze the answers. Calling it again, or before any exam exists, changes nothing."""
        if not self.is_active:
            return self
        logger.info(f"Exam finished: {len(self.answers)}/{len(self.questions)} answered")
        return replace(self, finished=True)

    def reset(self) -> "ExamSession":
        """Drop questions and answers; back to unstarted."""
        return ExamSession()
