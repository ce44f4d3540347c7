from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

def score_topic_test(questions: Sequence[Dict[str, Any]], answers: Mapping[int, int]) -> float:
	"""Percentage of topic-test questions answered with the correct option."""
	if not questions:
		return 0.0
	correct = sum(1 for idx, q in enumerate(questions) if answers.get(idx) == q.get("correct_answer"))
	return correct / len(questions) * 100

def topic_performance(notes: bool, video: bool, test_score: Optional[float]) -> Tuple[int, str]:
	if test_score == 100:
		if notes and video:
			return 100, "Excellent Mastery 🎯"
		return 100, "Test Mastered - Consider Reviewing Notes for Reinforcement."
	percentage = 0.0
	if notes:
		percentage += 33.33
	if video:
		percentage += 33.33
	if test_score is not None:
		percentage += (test_score / 100) * 33.34
	rounded = min(100, round(percentage))
	if rounded == 100:
		remark = "Excellent Mastery 🎯"
	elif rounded >= 80:
		remark = "Strong Understanding"
	elif rounded >= 50:
		remark = "Good Progress, Needs Revision"
	else:
		remark = "Requires More Practice"
	return rounded, remark

def chapter_difficulty(scores: List[Optional[float]]) -> Tuple[str, float]:
	"""Pitch for a chapter test plus the average topic score it was based on."""
	# Unattempted topics are ignored; an untouched chapter counts as 50%.
	attempted = [s for s in scores if s is not None]
	avg = sum(attempted) / len(attempted) if attempted else 50.0
	if avg > 80:
		return "Challenging", avg
	if avg > 50:
		return "Moderate", avg
	return "Easy/Foundational", avg
