"""
State of the multi-step survey form.

The form is an immutable ``FormState`` advanced by ``update``, one call per user event.  Nothing is
mutated in place; every event returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Sequence, Union

from survey.catalog import SURVEY, SurveyCategory, find_question


@dataclass(frozen=True)
class Answer:
    """The respondent picked ``value`` for the question ``question_text``."""

    question_text: str
    value: str


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Previous:
    pass


Event = Union[Answer, Next, Previous]


@dataclass(frozen=True)
class FormState:
    """
    Attributes:
        step: Index of the category currently shown.
        answers: Read-only mapping of question text to the answer given so far.
    """

    step: int = 0
    answers: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def _answer(answers: Mapping[str, Any], event: Answer, survey: Sequence[SurveyCategory]) -> Dict[str, Any]:
    updated = dict(answers)
    question = find_question(event.question_text, tuple(survey))
    if question is not None and question.is_multi:
        previous = list(answers.get(event.question_text) or [])
        if event.value in previous:
            updated[event.question_text] = [v for v in previous if v != event.value]
        else:
            updated[event.question_text] = previous + [event.value]
    else:
        updated[event.question_text] = event.value
    return updated


def update(state: FormState, event: Event, survey: Sequence[SurveyCategory] = SURVEY) -> FormState:
    """Apply one event to the form and return the resulting state."""
    if isinstance(event, Answer):
        return replace(state, answers=MappingProxyType(_answer(state.answers, event, survey)))
    if isinstance(event, Next):
        if state.step < len(survey) - 1:
            return replace(state, step=state.step + 1)
        return state
    if isinstance(event, Previous):
        if state.step > 0:
            return replace(state, step=state.step - 1)
        return state
    raise TypeError(f"Unsupported form event: {event!r}")


def current_category(state: FormState, survey: Sequence[SurveyCategory] = SURVEY) -> SurveyCategory:
    return survey[state.step]


def is_last_step(state: FormState, survey: Sequence[SurveyCategory] = SURVEY) -> bool:
    return state.step == len(survey) - 1


def submission(state: FormState) -> Dict[str, Any]:
    """Body for ``POST /api/surveys``."""
    return {"responses": {key: (list(value) if isinstance(value, list) else value)
                          for key, value in state.answers.items()}}
