"""Department rating statistics"""
import logging
from typing import Any, Dict, Iterable, List, Sequence
from pydantic import TypeAdapter, ValidationError
from app.feedback.schemas import AnsweredQuestion

logger = logging.getLogger(__name__)

_answers = TypeAdapter(List[AnsweredQuestion])


def parse_answers(raw: Any) -> List[AnsweredQuestion]:
    """
    Validate the embedded question/rating data of one feedback record.

    Accepts a list of dicts or AnsweredQuestion objects, or a JSON string
    holding such a list. Data that does not validate is treated as an
    empty list so one bad record cannot break a whole aggregation.

    Args:
        raw: Embedded question data as stored or received

    Returns:
        List of AnsweredQuestion (empty for None or malformed data)
    """
    if raw is None:
        return []
    try:
        if isinstance(raw, (str, bytes)):
            return _answers.validate_json(raw)
        return _answers.validate_python(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed question data ({e.error_count()} error(s))")
        return []


def _average(total: int, count: int) -> float:
    return total / count if count else 0.0


def compute_department_stats(feedbacks: Iterable[Any], departments: Sequence[str]) -> List[Dict]:
    """
    Compute per-department and per-question average ratings.

    Every department in `departments` gets exactly one entry, in that order,
    including departments nobody rated (zero average, zero feedbacks, no
    question stats). A department's average is the sum of all its ratings
    divided by the number of ratings, not by the number of feedbacks.
    Question stats keep the order in which each question was first seen.
    Feedback targeting a department outside the list is ignored.

    Args:
        feedbacks: Records with `target_department` and `questions`
        departments: The configured department list

    Returns:
        List of dicts with department, average_rating, total_feedbacks
        and question_stats (question_id, question_text, average_rating)
    """
    partitions: Dict[str, List[Any]] = {department: [] for department in departments}
    for feedback in feedbacks:
        bucket = partitions.get(feedback.target_department)
        if bucket is not None:
            bucket.append(feedback)

    stats = []
    for department in departments:
        department_feedbacks = partitions[department]
        questions: Dict[str, Dict] = {}
        total_rating = 0
        total_ratings = 0

        for feedback in department_feedbacks:
            for answer in parse_answers(feedback.questions):
                entry = questions.setdefault(
                    answer.id,
                    {"question_id": answer.id, "question_text": answer.text, "total": 0, "count": 0},
                )
                entry["total"] += answer.rating
                entry["count"] += 1
                total_rating += answer.rating
                total_ratings += 1

        stats.append({
            "department": department,
            "average_rating": _average(total_rating, total_ratings),
            "total_feedbacks": len(department_feedbacks),
            "question_stats": [
                {
                    "question_id": entry["question_id"],
                    "question_text": entry["question_text"],
                    "average_rating": _average(entry["total"], entry["count"]),
                }
                for entry in questions.values()
            ],
        })

    return stats
