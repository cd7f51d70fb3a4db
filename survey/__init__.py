from .catalog import SURVEY, SurveyCategory, SurveyQuestion, SINGLE_CHOICE, MULTI_CHOICE, find_question
from .aggregator import (
    count_single_answer,
    count_multi_answer,
    count_answers,
    top_n,
    percentage_of,
)
