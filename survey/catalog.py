"""
Static survey definition.

The catalog is an ordered list of categories, each holding an ordered list of questions.  Stored
responses refer back to it by the literal question text, so renaming a question here detaches it
from every answer already collected under the old text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

SINGLE_CHOICE = "single-choice"
MULTI_CHOICE = "multi-choice"


@dataclass(frozen=True)
class SurveyQuestion:
    """
    A single question of the survey.

    Attributes:
        text: The question as shown to respondents; doubles as the answer key.
        type: Either SINGLE_CHOICE or MULTI_CHOICE.
        options: The ordered answer options.
    """

    text: str
    type: str
    options: Tuple[str, ...]

    @property
    def is_multi(self) -> bool:
        return self.type == MULTI_CHOICE

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "type": self.type, "options": list(self.options)}


@dataclass(frozen=True)
class SurveyCategory:
    """A named step of the form with its questions."""

    name: str
    questions: Tuple[SurveyQuestion, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "questions": [q.to_dict() for q in self.questions]}


def _single(text: str, *options: str) -> SurveyQuestion:
    return SurveyQuestion(text, SINGLE_CHOICE, options)


def _multi(text: str, *options: str) -> SurveyQuestion:
    return SurveyQuestion(text, MULTI_CHOICE, options)


# Question texts the dashboard views chart
OVERALL_SATISFACTION = "Overall, how satisfied are you with your current role?"
WORKFLOW_EFFICIENCY = "How efficient are your current development workflows?"
RECOMMENDATION_LIKELIHOOD = "How likely are you to recommend working here?"
CAREER_PATH_CLARITY = "How clear is your career path here?"
DESIRED_SKILLS = "What skills would you most like to develop?"
CAREER_GOALS = "What is your primary career goal in the next 2-3 years?"
DEV_PAIN_POINTS = "Which areas slow down your development process the most?"
TOOLS_NEEDING_ATTENTION = "Which tools need immediate attention?"
TEAM_COMMUNICATION = "How would you rate team communication?"
LEADERSHIP_COMMUNICATION = "How effective is leadership communication?"
LEADERSHIP_QUALITIES = "What leadership qualities should we develop?"
COLLABORATION_AREAS = "Which collaboration aspects need improvement?"
COMMUNICATION_CHANNELS = "What communication channels need improvement?"


SURVEY: Tuple[SurveyCategory, ...] = (
    SurveyCategory("Technical Workflows", (
        _single(
            WORKFLOW_EFFICIENCY,
            "Extremely inefficient", "Somewhat inefficient", "Neutral",
            "Somewhat efficient", "Extremely efficient",
        ),
        _multi(
            DEV_PAIN_POINTS,
            "Code Review Bottlenecks", "Unclear Requirements", "Outdated Documentation",
            "Inefficient Testing", "Deployment Complexity", "Legacy Code Maintenance",
            "Lack of Automation", "Limited Access to Resources",
            "Inadequate Version Control Practices",
        ),
        _single(
            "How efficient are our current development workflows?",
            "Very inefficient", "Somewhat inefficient", "Neutral",
            "Somewhat efficient", "Very efficient",
        ),
        _multi(
            "Select top 3 technical pain points:",
            "Slow CI/CD pipelines", "Flaky tests", "Poor documentation", "Complex deployments",
            "Legacy code challenges", "Environment inconsistencies", "Tooling limitations",
            "Code review bottlenecks",
        ),
    )),
    SurveyCategory("Professional Growth", (
        _multi(
            DESIRED_SKILLS,
            "Advanced Backend Techniques", "Frontend Framework Mastery", "Cloud Architecture",
            "DevOps Practices", "System Design", "Machine Learning Integration",
            "Data Engineering", "Blockchain Technologies", "Security Best Practices",
        ),
        _single(
            "How supported do you feel in your professional development?",
            "Not supported at all", "Slightly supported", "Moderately supported",
            "Very supported", "Extremely supported",
        ),
        _single(
            "How satisfied are you with current growth opportunities?",
            "Very dissatisfied", "Somewhat dissatisfied", "Neutral",
            "Somewhat satisfied", "Very satisfied",
        ),
        _multi(
            "Which skills do you want to develop?",
            "Cloud architecture", "System design", "DevOps practices",
            "Performance optimization", "Security engineering", "Technical leadership",
            "Data engineering", "AI/ML applications",
        ),
        _multi(
            "What type of training would benefit you most?",
            "Hands-on workshops", "Conference attendance", "Certification programs",
            "Mentorship pairings", "Brown bag sessions", "Online courses", "Project rotations",
        ),
    )),
    SurveyCategory("Team Dynamics", (
        _single(TEAM_COMMUNICATION, "Very Poor", "Poor", "Average", "Good", "Excellent"),
        _multi(
            COMMUNICATION_CHANNELS,
            "Daily Stand-ups", "Slack/Messaging", "Email", "Documentation", "Sprint Planning",
            "Retrospectives", "One-on-one Meetings", "Team-building Activities",
        ),
        _single(
            "How effective is team communication?",
            "Very ineffective", "Somewhat ineffective", "Neutral",
            "Somewhat effective", "Very effective",
        ),
        _multi(
            COLLABORATION_AREAS,
            "Daily stand-ups", "Sprint planning", "Retrospectives", "Knowledge sharing",
            "Cross-team coordination", "Documentation practices", "Decision transparency",
        ),
    )),
    SurveyCategory("Leadership Feedback", (
        _single(
            LEADERSHIP_COMMUNICATION,
            "Very ineffective", "Somewhat ineffective", "Neutral",
            "Somewhat effective", "Very effective",
        ),
        _multi(
            LEADERSHIP_QUALITIES,
            "Technical vision", "Decision speed", "Transparency", "Mentorship",
            "Stakeholder management", "Removing blockers", "Recognizing contributions",
        ),
    )),
    SurveyCategory("Work-Life Balance", (
        _single(
            "How would you rate your current work-life balance?",
            "Extremely Poor", "Poor", "Neutral", "Good", "Extremely Good",
        ),
        _multi(
            "What contributes most to your stress at work?",
            "Tight Deadlines", "Excessive Meetings", "Unclear Expectations", "Lack of Autonomy",
            "Technical Debt", "Constant Context Switching", "Inadequate Resources",
            "Poor Management",
        ),
    )),
    SurveyCategory("Tools and Infrastructure", (
        _single(
            "How satisfied are you with your current development tools?",
            "Very Dissatisfied", "Dissatisfied", "Neutral", "Satisfied", "Very Satisfied",
        ),
        _multi(
            "Which tools would you like to see improved or introduced?",
            "IDE", "Version Control", "Continuous Integration", "Deployment Tools",
            "Monitoring Systems", "Collaboration Platforms", "Code Quality Tools",
            "Project Management Software",
        ),
        _single(
            "How satisfied are you with our development tools?",
            "Very dissatisfied", "Somewhat dissatisfied", "Neutral",
            "Somewhat satisfied", "Very satisfied",
        ),
        _multi(
            TOOLS_NEEDING_ATTENTION,
            "IDEs/editors", "Version control", "CI/CD systems", "Testing frameworks",
            "Monitoring tools", "Debugging utilities", "Documentation systems",
            "Project management",
        ),
    )),
    SurveyCategory("Career Aspirations", (
        _multi(
            CAREER_GOALS,
            "Technical Leadership", "Become a Specialist", "Move to Management",
            "Start a Startup", "Transition to a Different Tech Domain",
            "Improve Technical Skills", "Work on Cutting-edge Technologies",
        ),
        _single(
            CAREER_PATH_CLARITY,
            "Very unclear", "Somewhat unclear", "Neutral", "Somewhat clear", "Very clear",
        ),
        _multi(
            "What career aspects matter most?",
            "Technical challenges", "Leadership opportunities", "Compensation growth",
            "Work-life balance", "Learning opportunities", "Project impact", "Company stability",
        ),
    )),
    SurveyCategory("Final Thoughts", (
        _single(
            OVERALL_SATISFACTION,
            "Extremely Dissatisfied", "Dissatisfied", "Neutral", "Satisfied",
            "Extremely Satisfied",
        ),
        _single(
            RECOMMENDATION_LIKELIHOOD,
            "Not likely at all", "Slightly unlikely", "Neutral", "Somewhat likely",
            "Extremely likely",
        ),
    )),
)


def all_questions(catalog: Tuple[SurveyCategory, ...] = SURVEY) -> List[SurveyQuestion]:
    """Return every question of the catalog in form order."""
    return [q for category in catalog for q in category.questions]


def find_question(text: str, catalog: Tuple[SurveyCategory, ...] = SURVEY) -> Optional[SurveyQuestion]:
    """Look a question up by its text, or return None."""
    for question in all_questions(catalog):
        if question.text == text:
            return question
    return None


def unknown_questions(answers: Mapping[str, Any], catalog: Tuple[SurveyCategory, ...] = SURVEY) -> List[str]:
    """Return the answer keys that do not name a catalog question."""
    known = {q.text for q in all_questions(catalog)}
    return [key for key in answers if key not in known]


def catalog_to_dict(catalog: Tuple[SurveyCategory, ...] = SURVEY) -> List[Dict[str, Any]]:
    return [category.to_dict() for category in catalog]
