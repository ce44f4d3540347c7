from typing import Any, Dict, List, Optional, Tuple
from ..content import CURRICULUM, LIBRARY_PDFS

def subject_summaries() -> List[Tuple[str, int]]:
	return [(subject, len(chapters)) for subject, chapters in CURRICULUM.items()]

def chapters_for(subject: str) -> Optional[List[Dict[str, Any]]]:
	return CURRICULUM.get(subject)

def find_chapter(chapter_id: str) -> Optional[Tuple[str, Dict[str, Any]]]:
	for subject, chapters in CURRICULUM.items():
		for chapter in chapters:
			if chapter["id"] == chapter_id:
				return subject, chapter
	return None

def find_topic(topic_id: str) -> Optional[Dict[str, Any]]:
	for chapters in CURRICULUM.values():
		for chapter in chapters:
			for topic in chapter["topics"]:
				if topic["id"] == topic_id:
					return topic
	return None

def library(grade: Optional[int] = None, subject: Optional[str] = None) -> List[Dict[str, Any]]:
	return [
		pdf for pdf in LIBRARY_PDFS
		if (grade is None or pdf["grade"] == grade) and (subject is None or pdf["subject"] == subject)
	]
