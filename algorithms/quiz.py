"""
quiz.py — Teaching Questions
=============================
A QuizBank is the ordered list of multiple-choice questions one engine
asks at its checkpoints.  Checkpoint k asks question `k % len(bank)`.

Randomisation happens once, in the constructor, from a private
random.Random(seed): option order is shuffled per question (the correct
index follows its text) and then the question order is shuffled.  After
construction the bank is immutable, so stepping stays deterministic for
the rest of the session.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Question:
    text:          str
    options:       List[str]
    correct_index: int = 0
    explanation:   str = ""

    def is_correct(self, option: int) -> bool:
        return option == self.correct_index

    def to_dict(self) -> dict:
        return {
            "text":          self.text,
            "options":       list(self.options),
            "correct_index": self.correct_index,
            "explanation":   self.explanation,
        }


@dataclass(frozen=True)
class AnswerFeedback:
    question_index: int
    chosen:         int
    correct_index:  int
    correct:        bool
    explanation:    str = ""

    def to_dict(self) -> dict:
        return {
            "question_index": self.question_index,
            "chosen":         self.chosen,
            "correct_index":  self.correct_index,
            "correct":        self.correct,
            "explanation":    self.explanation,
        }


class QuizBank:
    """
    Attributes:
        questions : The (possibly shuffled) questions, fixed for the session.
        shuffled  : Whether the constructor randomised them.
        seed      : Seed used for the shuffle (None → OS entropy).
    """

    def __init__(
        self,
        questions: Sequence[Question] = (),
        shuffle: bool = False,
        seed: Optional[int] = None,
    ):
        self.shuffled = shuffle
        self.seed     = seed
        qs = list(questions)
        if shuffle:
            qs = _randomize(qs, random.Random(seed))
        self.questions: List[Question] = qs

    def get(self, index: int) -> Optional[Question]:
        if 0 <= index < len(self.questions):
            return self.questions[index]
        return None

    def index_for(self, checkpoint: int) -> Optional[int]:
        """Question index to ask at the given checkpoint count, or None if empty."""
        if not self.questions:
            return None
        return checkpoint % len(self.questions)

    def answer(self, index: int, option: int) -> Optional[AnswerFeedback]:
        q = self.get(index)
        if q is None:
            return None
        return AnswerFeedback(
            question_index=index,
            chosen=option,
            correct_index=q.correct_index,
            correct=q.is_correct(option),
            explanation=q.explanation,
        )

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)


def _randomize(questions: List[Question], rng: random.Random) -> List[Question]:
    out = []
    for q in questions:
        correct_text = q.options[q.correct_index]
        options = list(q.options)
        rng.shuffle(options)
        out.append(Question(
            text=q.text,
            options=options,
            correct_index=options.index(correct_text),
            explanation=q.explanation,
        ))
    rng.shuffle(out)
    return out
