"""
Dashboard views built from a snapshot of survey responses.

Each view returns the JSON-ready chart data for one dashboard tab.  Views hold no logic of their own
beyond picking questions and shaping aggregator output.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from survey import aggregator
from survey import catalog
from survey.catalog import SURVEY, SurveyCategory

SATISFIED_ANSWERS = ("Satisfied", "Extremely Satisfied")
RECOMMEND_ANSWERS = ("Somewhat likely", "Extremely likely")
TOP_SKILLS = 5


class UnknownView(LookupError):
    """Raised for a dashboard view name that does not exist."""


def _ranked(records: Sequence[Any], question_text: str, n: Optional[int] = None) -> List[Dict[str, Any]]:
    return aggregator.top_n(aggregator.count_multi_answer(records, question_text), n)


def _series(records: Sequence[Any], question_text: str) -> List[Dict[str, Any]]:
    return aggregator.to_series(aggregator.count_single_answer(records, question_text))


def overview(records: Sequence[Any], **_: Any) -> Dict[str, Any]:
    satisfaction = aggregator.count_single_answer(records, catalog.OVERALL_SATISFACTION)
    recommendation = aggregator.count_single_answer(records, catalog.RECOMMENDATION_LIKELIHOOD)
    return {
        "totalResponses": len(records),
        "satisfiedEmployees": aggregator.sum_counts(satisfaction, SATISFIED_ANSWERS),
        "wouldRecommend": aggregator.sum_counts(recommendation, RECOMMEND_ANSWERS),
        "overallSatisfaction": aggregator.to_series(satisfaction),
        "workflowEfficiency": _series(records, catalog.WORKFLOW_EFFICIENCY),
        "recommendationLikelihood": aggregator.to_series(recommendation),
    }


def career(records: Sequence[Any], **_: Any) -> Dict[str, Any]:
    return {
        "careerPathClarity": _series(records, catalog.CAREER_PATH_CLARITY),
        "desiredSkills": _ranked(records, catalog.DESIRED_SKILLS, TOP_SKILLS),
        "careerGoals": _ranked(records, catalog.CAREER_GOALS),
    }


def tools(records: Sequence[Any], **_: Any) -> Dict[str, Any]:
    return {
        "toolsNeedingAttention": _ranked(records, catalog.TOOLS_NEEDING_ATTENTION),
        "devPainPoints": _ranked(records, catalog.DEV_PAIN_POINTS),
    }


def communication(records: Sequence[Any], **_: Any) -> Dict[str, Any]:
    return {
        "teamCommunication": _series(records, catalog.TEAM_COMMUNICATION),
        "leadershipCommunication": _series(records, catalog.LEADERSHIP_COMMUNICATION),
        "leadershipQualities": _ranked(records, catalog.LEADERSHIP_QUALITIES),
        "collaborationAreas": _ranked(records, catalog.COLLABORATION_AREAS),
        "communicationChannels": _ranked(records, catalog.COMMUNICATION_CHANNELS),
    }


def details(records: Sequence[Any], search: Optional[str] = None, **_: Any) -> Dict[str, Any]:
    filtered = aggregator.filter_responses(records, search)
    return {
        "responses": [_as_dict(record) for record in filtered],
        "shown": len(filtered),
        "total": len(records),
    }


VIEWS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "overview": overview,
    "career": career,
    "tools": tools,
    "communication": communication,
    "details": details,
}


def build_view(name: str, records: Sequence[Any], search: Optional[str] = None) -> Dict[str, Any]:
    """Build the named dashboard view, raising UnknownView for anything else."""
    try:
        view = VIEWS[name]
    except KeyError:
        raise UnknownView(name)
    return view(records, search=search)


def results(records: Sequence[Any]) -> Dict[str, Any]:
    """Per-question counts for every question present in the data, grouped by answer shape."""
    single, multi = aggregator.split_questions(records)

    def entry(question_text: str) -> Dict[str, Any]:
        return {"question": question_text, "counts": aggregator.count_answers(records, question_text)}

    return {
        "totalResponses": len(records),
        "singleAnswer": [entry(q) for q in single],
        "multiSelect": [entry(q) for q in multi],
    }


def response_breakdown(answers: Dict[str, Any], survey: Sequence[SurveyCategory] = SURVEY) -> List[Dict[str, Any]]:
    """Chart one respondent's answers per category against the catalog's options."""
    categories = []
    for category in survey:
        questions = []
        for question in category.questions:
            data = aggregator.option_breakdown(answers, question)
            if data is not None:
                questions.append({"question": question.text, "type": question.type, "data": data})
        categories.append({"category": category.name, "questions": questions})
    return categories


def _as_dict(record: Any) -> Dict[str, Any]:
    return record if isinstance(record, dict) else record.to_dict()
