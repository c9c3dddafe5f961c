"""Journal prompts and canned reflections"""
import random
from typing import Optional

PROMPTS = [
    "What is one small win from today?",
    "What is weighing on your mind?",
    "Describe your ideal relaxing place.",
    "Who are you grateful for today?",
]

DEFAULT_REFLECTION = "Thank you for sharing that."

# First matching keyword group wins
REFLECTIONS = [
    (("sad", "tired"), "It's okay to feel this way. Be gentle with yourself today."),
    (("happy", "excited"), "That is wonderful! Hold onto that feeling."),
    (("worry", "anxious"), "Take a deep breath. Focus on what you can control right now."),
]


def random_prompt(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(PROMPTS)


def reflect(text: str) -> str:
    """Pick a supportive reply for a journal entry"""
    lower = text.lower()
    for keywords, reply in REFLECTIONS:
        if any(word in lower for word in keywords):
            return reply
    return DEFAULT_REFLECTION
