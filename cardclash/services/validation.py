import json
from pydantic import ValidationError
from ..schemas import Question, ValidatedDeckContent

class DeckValidationError(Exception):
    """Base class for deck payloads that must not reach the store."""

    message = "Deck could not be saved."

    def __str__(self) -> str:
        return self.message

class MalformedContent(DeckValidationError):
    message = "Deck could not be saved: contentJson is not valid JSON."

class MissingQuestionsArray(DeckValidationError):
    message = "Deck could not be saved: contentJson must contain a 'questions' array."

class InvalidQuestion(DeckValidationError):
    def __init__(self, index: int):
        super().__init__(index)
        self.index = index
        self.message = (
            f"Deck could not be saved: question at index {index} is missing required fields "
            "(questionText, optionA-D, correctAnswer A-D)."
        )

def validate_deck_content(raw_content: str) -> ValidatedDeckContent:
    """
    Strict write-time check of a deck's contentJson.

    Stops at the first bad question. The original text is returned untouched in
    ``raw`` so the store keeps the author's formatting.
    """
    try:
        data = json.loads(raw_content)
    except (TypeError, ValueError):
        raise MalformedContent()

    if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
        raise MissingQuestionsArray()

    questions = []
    for i, item in enumerate(data["questions"]):
        if not isinstance(item, dict):
            raise InvalidQuestion(i)
        try:
            questions.append(Question.model_validate(item))
        except ValidationError:
            raise InvalidQuestion(i)

    return ValidatedDeckContent(raw=raw_content, questions=questions)
