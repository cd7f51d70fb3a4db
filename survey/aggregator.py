"""
Response aggregation for the dashboard charts.

Every function here is a pure transform over a snapshot of stored responses.  A record is either a
``SurveyResponse`` row or the mapping the listing endpoint returns for it; only its answers are
read.  Answers of an unexpected shape are skipped, never reported.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from survey.catalog import SurveyQuestion


def _answers(record: Any) -> Mapping[str, Any]:
    if isinstance(record, Mapping):
        answers = record.get("answers")
    else:
        answers = getattr(record, "answers", None)
    return answers if isinstance(answers, Mapping) else {}


def _strings(items: List[Any]) -> List[str]:
    # numbers, nested lists and objects inside an answer list are not options
    return [item for item in items if isinstance(item, str)]


def count_single_answer(records: Iterable[Any], question_text: str) -> Dict[str, int]:
    """
    Tally the single-string answers given to a question.

    Records without the question, or holding a list for it, are skipped.  Keys keep the order in
    which each answer was first seen.
    """
    counts: Dict[str, int] = {}
    for record in records:
        answer = _answers(record).get(question_text)
        if isinstance(answer, str):
            counts[answer] = counts.get(answer, 0) + 1
    return counts


def count_multi_answer(records: Iterable[Any], question_text: str) -> Dict[str, int]:
    """
    Tally every option picked for a multi-select question.

    Each string in a record's answer list counts once; other list items, single strings and
    missing answers are skipped.
    """
    counts: Dict[str, int] = {}
    for record in records:
        answer = _answers(record).get(question_text)
        if isinstance(answer, list):
            for item in _strings(answer):
                counts[item] = counts.get(item, 0) + 1
    return counts


def count_answers(records: Iterable[Any], question_text: str) -> Dict[str, int]:
    """Tally a question whatever its answer shape: strings in a list and single strings alike."""
    counts: Dict[str, int] = {}
    for record in records:
        answer = _answers(record).get(question_text)
        if isinstance(answer, list):
            for item in _strings(answer):
                counts[item] = counts.get(item, 0) + 1
        elif isinstance(answer, str):
            counts[answer] = counts.get(answer, 0) + 1
    return counts


def top_n(counts: Mapping[str, int], n: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Rank counts highest first as ``{"name", "count"}`` entries.

    The sort is stable, so equal counts keep their iteration order.  ``n=None`` ranks everything.
    """
    ranked = sorted(
        ({"name": name, "count": count} for name, count in counts.items()),
        key=lambda entry: entry["count"],
        reverse=True,
    )
    if n is None:
        return ranked
    return ranked[:max(n, 0)]


def percentage_of(value: int, counts: Mapping[str, int]) -> int:
    """Return value as a whole percentage of all counts; 0 while there are no responses."""
    total = sum(counts.values())
    if total == 0:
        return 0
    return int(value * 100 / total + 0.5)


def to_series(counts: Mapping[str, int]) -> List[Dict[str, Any]]:
    """Pie chart data: one ``{"name", "value", "percentage"}`` entry per answer."""
    return [
        {"name": name, "value": value, "percentage": percentage_of(value, counts)}
        for name, value in counts.items()
    ]


def sum_counts(counts: Mapping[str, int], names: Iterable[str]) -> int:
    """Total the counts of the given answer values; absent values count as zero."""
    return sum(counts.get(name, 0) for name in set(names))


def split_questions(records: Sequence[Any]) -> Tuple[List[str], List[str]]:
    """
    Split every question seen in the records into single-answer and multi-select groups.

    A question's group comes from the first record holding a non-empty answer for it; questions
    that were only ever answered with empty values land in neither group.
    """
    seen: List[str] = []
    for record in records:
        for question_text in _answers(record):
            if question_text not in seen:
                seen.append(question_text)

    single: List[str] = []
    multi: List[str] = []
    for question_text in seen:
        for record in records:
            answer = _answers(record).get(question_text)
            if answer:
                (multi if isinstance(answer, list) else single).append(question_text)
                break
    return single, multi


def _matches(question_text: str, answer: Any, term: str) -> bool:
    if term in question_text.lower():
        return isinstance(answer, (str, list))
    if isinstance(answer, str):
        return term in answer.lower()
    if isinstance(answer, list):
        return any(isinstance(item, str) and term in item.lower() for item in answer)
    return False


def filter_responses(records: Sequence[Any], term: Optional[str]) -> List[Any]:
    """Keep records where any question text or answer contains the term, ignoring case."""
    if not term or not term.strip():
        return list(records)
    term = term.lower()
    return [
        record for record in records
        if any(_matches(q, a, term) for q, a in _answers(record).items())
    ]


def option_breakdown(answers: Mapping[str, Any], question: SurveyQuestion) -> Optional[List[Dict[str, Any]]]:
    """
    Lay one answer set out against a question's options, 1 for chosen and 0 otherwise.

    Returns None when the stored answer does not have the shape the question type expects.
    """
    answer = answers.get(question.text)
    if question.is_multi:
        if not isinstance(answer, list):
            return None
        return [{"name": option, "count": 1 if option in answer else 0} for option in question.options]
    if not isinstance(answer, str):
        return None
    return [{"name": option, "count": 1 if answer == option else 0} for option in question.options]
