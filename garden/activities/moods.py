"""Mood check-in options"""
from garden.exceptions import ValidationError

MOODS = ("calm", "happy", "anxious", "tired", "sad")

MOOD_FEEDBACK = "Your garden acknowledges your feelings."


def validate_mood(mood: str) -> str:
    if mood not in MOODS:
        raise ValidationError(
            f"Unknown mood (choose from {', '.join(MOODS)})",
            field="mood",
            value=mood,
        )
    return mood
