from survey import aggregator
from survey.catalog import SurveyQuestion, SINGLE_CHOICE, MULTI_CHOICE


def _records(*answer_sets):
    return [{"id": i, "answers": answers} for i, answers in enumerate(answer_sets, start=1)]


def test_count_single_answer_two_values():
    records = _records({"Q1": "A"}, {"Q1": "B"})
    assert aggregator.count_single_answer(records, "Q1") == {"A": 1, "B": 1}


def test_count_single_answer_skips_lists_and_missing():
    records = _records({"Q1": "A"}, {"Q1": ["A", "B"]}, {"Q2": "A"}, {"Q1": "A"})
    counts = aggregator.count_single_answer(records, "Q1")
    assert counts == {"A": 2}
    assert sum(counts.values()) <= len(records)


def test_count_single_answer_keeps_first_seen_order():
    records = _records({"Q1": "B"}, {"Q1": "A"}, {"Q1": "B"})
    assert list(aggregator.count_single_answer(records, "Q1")) == ["B", "A"]


def test_count_single_answer_equals_len_when_all_answered():
    records = _records({"Q1": "A"}, {"Q1": "B"}, {"Q1": "A"})
    assert sum(aggregator.count_single_answer(records, "Q1").values()) == len(records)


def test_count_multi_answer_counts_each_element():
    records = _records({"Q": ["x", "y"]}, {"Q": ["y"]}, {"Q": []}, {"Q": "x"}, {})
    counts = aggregator.count_multi_answer(records, "Q")
    assert counts == {"x": 1, "y": 2}
    expected = sum(len(r["answers"].get("Q") or []) for r in records if isinstance(r["answers"].get("Q"), list))
    assert sum(counts.values()) == expected


def test_records_may_be_objects_with_answers():
    class Row:
        def __init__(self, answers):
            self.answers = answers

    rows = [Row({"Q": "A"}), Row(None), Row({"Q": "A"})]
    assert aggregator.count_single_answer(rows, "Q") == {"A": 2}


def test_count_answers_mixes_shapes():
    records = _records({"Q": "A"}, {"Q": ["A", "B"]})
    assert aggregator.count_answers(records, "Q") == {"A": 2, "B": 1}


def test_top_n_orders_and_truncates():
    counts = {"a": 1, "b": 3, "c": 2, "d": 3}
    ranked = aggregator.top_n(counts, 3)
    assert ranked == [
        {"name": "b", "count": 3},
        {"name": "d", "count": 3},
        {"name": "c", "count": 2},
    ]


def test_top_n_without_limit_and_non_positive():
    counts = {"a": 1, "b": 2}
    assert [e["name"] for e in aggregator.top_n(counts)] == ["b", "a"]
    assert aggregator.top_n(counts, 0) == []
    assert aggregator.top_n(counts, -1) == []


def test_top_n_is_idempotent():
    counts = {"a": 2, "b": 2, "c": 5, "d": 1}
    once = aggregator.top_n(counts, 3)
    again = {e["name"]: e["count"] for e in once}
    assert aggregator.top_n(again, 3) == once
    assert aggregator.top_n(again, 10) == once


def test_percentage_of():
    counts = {"a": 1, "b": 2}
    assert aggregator.percentage_of(1, counts) == 33
    assert aggregator.percentage_of(2, counts) == 67
    assert 99 <= sum(aggregator.percentage_of(v, counts) for v in counts.values()) <= 101


def test_percentage_of_rounds_half_up():
    assert aggregator.percentage_of(1, {"a": 1, "b": 7}) == 13


def test_percentage_of_no_responses():
    assert aggregator.percentage_of(0, {}) == 0
    assert aggregator.percentage_of(0, {"a": 0}) == 0


def test_to_series_and_sum_counts():
    counts = {"Satisfied": 3, "Neutral": 1}
    assert aggregator.to_series(counts) == [
        {"name": "Satisfied", "value": 3, "percentage": 75},
        {"name": "Neutral", "value": 1, "percentage": 25},
    ]
    assert aggregator.sum_counts(counts, ["Satisfied", "Extremely Satisfied"]) == 3


def test_split_questions_uses_first_non_empty_answer():
    records = _records(
        {"rating": "Good", "multi": []},
        {"multi": ["x"], "blank": ""},
    )
    single, multi = aggregator.split_questions(records)
    assert single == ["rating"]
    assert multi == ["multi"]


def test_filter_responses():
    records = _records(
        {"How is the team?": "Excellent"},
        {"Which tools?": ["Version control", "IDE"]},
        {"Other": 5},
    )
    assert aggregator.filter_responses(records, "") == records
    assert aggregator.filter_responses(records, "   ") == records
    assert aggregator.filter_responses(records, "excel") == [records[0]]
    assert aggregator.filter_responses(records, "VERSION") == [records[1]]
    assert aggregator.filter_responses(records, "tools") == [records[1]]
    assert aggregator.filter_responses(records, "other") == []


def test_option_breakdown():
    single = SurveyQuestion("Q", SINGLE_CHOICE, ("A", "B"))
    multi = SurveyQuestion("M", MULTI_CHOICE, ("x", "y", "z"))
    answers = {"Q": "B", "M": ["z", "x"]}
    assert aggregator.option_breakdown(answers, single) == [
        {"name": "A", "count": 0},
        {"name": "B", "count": 1},
    ]
    assert [e["count"] for e in aggregator.option_breakdown(answers, multi)] == [1, 0, 1]
    assert aggregator.option_breakdown({"Q": ["A"]}, single) is None
    assert aggregator.option_breakdown({"M": "x"}, multi) is None


def test_malformed_list_items_are_skipped():
    records = _records(
        {"Q": [["x"], {"a": 1}, 1, None, "x"]},
        {"Q": {"x": True}},
        {"Q": ["y", ["y"]]},
    )
    assert aggregator.count_multi_answer(records, "Q") == {"x": 1, "y": 1}
    assert aggregator.count_answers(records, "Q") == {"x": 1, "y": 1}
    assert aggregator.count_single_answer(records, "Q") == {}


def test_non_mapping_answers_are_skipped():
    records = [{"answers": ["Q", "A"]}, {"answers": "A"}, {}, {"answers": {"Q": "A"}}]
    assert aggregator.count_single_answer(records, "Q") == {"A": 1}
    assert aggregator.count_multi_answer(records, "Q") == {}
    assert aggregator.split_questions(records) == (["Q"], [])
