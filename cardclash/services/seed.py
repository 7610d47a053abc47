"""
Starter decks and sessions loaded into the in-memory stores at startup.
Everything here is lost on restart; swap for real queries once a database exists.
"""
import json

def _deck_json(*questions: dict) -> str:
    return json.dumps({"questions": list(questions)})

SEED_DECKS = [
    {
        "id": 1,
        "title": "Math Warmup",
        "content_json": _deck_json({
            "questionText": "3 + 4",
            "optionA": "7", "optionB": "8", "optionC": "6", "optionD": "12",
            "correctAnswer": "A",
        }),
    },
    {
        "id": 2,
        "title": "US History 101",
        "content_json": _deck_json({
            "questionText": "Year of the Declaration",
            "optionA": "1776", "optionB": "1812", "optionC": "1865", "optionD": "1492",
            "correctAnswer": "A",
        }),
    },
    {
        "id": 3,
        "title": "Science Starter",
        "content_json": _deck_json({
            "questionText": "H2O is",
            "optionA": "Water", "optionB": "Oxygen", "optionC": "Hydrogen", "optionD": "Salt",
            "correctAnswer": "A",
        }),
    },
]

SEED_SESSIONS = [
    {
        "id": 101,
        "deck_id": 1,
        "deck_title": "Math Warmup",
        "created_at": "2026-02-03 09:12",
        "summary_paragraphs": [
            "Students started the session with strong pace control and quick recall on arithmetic prompts.",
            "Accuracy remained steady across the middle rounds, with a few learners improving response time after each reveal.",
            "The session ended with consistent participation, which indicates readiness for more complex mixed operations.",
        ],
        "metrics": {"rounds_played": 8, "average_accuracy": "86%", "average_response_time": "5.4s"},
    },
    {
        "id": 102,
        "deck_id": 2,
        "deck_title": "US History 101",
        "created_at": "2026-02-04 13:40",
        "summary_paragraphs": [
            "Learners showed high engagement during early prompts and frequently discussed answer choices before submission.",
            "The group demonstrated stronger knowledge of foundational dates than mid century events, which suggests a review opportunity.",
            "Final rounds showed improved consensus, which indicates the hints and explanations supported retention.",
        ],
        "metrics": {"rounds_played": 10, "average_accuracy": "79%", "average_response_time": "6.2s"},
    },
]
