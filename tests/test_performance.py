import pytest

from fluxed.services.performance import chapter_difficulty, score_topic_test, topic_performance

QUESTIONS = [
    {"text": "2 + 2 = ?", "options": ["3", "4"], "correct_answer": 1},
    {"text": "1 + 1 = ?", "options": ["2", "3"], "correct_answer": 0},
]


def test_score_topic_test():
    assert score_topic_test(QUESTIONS, {0: 1, 1: 0}) == 100
    assert score_topic_test(QUESTIONS, {0: 1}) == 50
    assert score_topic_test([], {}) == 0


@pytest.mark.parametrize(
    "notes, video, test_score, expected",
    [
        (True, True, 100, (100, "Excellent Mastery 🎯")),
        (False, False, 100, (100, "Test Mastered - Consider Reviewing Notes for Reinforcement.")),
        (True, True, 50, (83, "Strong Understanding")),
        (True, True, None, (67, "Good Progress, Needs Revision")),
        (True, False, None, (33, "Requires More Practice")),
        (False, False, None, (0, "Requires More Practice")),
    ],
)
def test_topic_performance(notes, video, test_score, expected):
    assert topic_performance(notes, video, test_score) == expected


def test_chapter_difficulty():
    assert chapter_difficulty([]) == ("Easy/Foundational", 50)
    assert chapter_difficulty([None, None]) == ("Easy/Foundational", 50)
    assert chapter_difficulty([90, 100, None]) == ("Challenging", 95)
    assert chapter_difficulty([60, 70]) == ("Moderate", 65)
    assert chapter_difficulty([20, 40]) == ("Easy/Foundational", 30)
