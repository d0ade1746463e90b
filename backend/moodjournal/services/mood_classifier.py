# mood classification for journal notes
# keyword table lookup, case-insensitive substring containment
#
# matching is raw substring, not whole-word: "sad" also fires inside
# "crusade" and "mad" inside "made". known precision limit, kept as-is.

import logging
from typing import Optional

logger = logging.getLogger(__name__)

NEUTRAL = "neutral"

# category -> keyword phrases, in display/priority order
MOOD_DEFINITIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ecstatic", ("ecstatic", "overjoyed", "elated", "thrilled", "euphoric")),
    ("happy", ("happy", "joy", "joyful", "glad", "delighted", "content", "satisfied", "good", "cheerful", "smiling")),
    ("excited", ("excited", "pumped", "hyped", "energized", "motivated", "enthusiastic")),
    ("calm", ("calm", "relaxed", "chill", "peaceful", "at ease")),
    ("grateful", ("grateful", "thankful", "appreciative", "blessed")),
    ("proud", ("proud", "accomplished", "achieved", "successful")),
    ("in_love", ("in love", "loving", "affection", "crush", "romantic")),
    ("hopeful", ("hopeful", "optimistic", "confident about the future")),
    ("stressed", ("stressed", "under pressure", "overwhelmed", "burned out")),
    ("anxious", ("anxious", "worried", "nervous", "tense", "on edge", "panic")),
    ("angry", ("angry", "mad", "furious", "irritated", "annoyed", "pissed")),
    ("frustrated", ("frustrated", "stuck", "fed up")),
    ("sad", ("sad", "down", "unhappy", "blue", "depressed", "miserable")),
    ("lonely", ("lonely", "alone", "isolated")),
    ("tired", ("tired", "exhausted", "drained", "sleepy", "fatigued")),
    ("bored", ("bored", "boring", "nothing to do")),
    ("confused", ("confused", "lost", "don't understand", "uncertain")),
    ("afraid", ("afraid", "scared", "terrified", "fearful")),
)

# canonical mood labels (referenced by models / colour table / frontend)
MOOD_CATEGORIES = [mood for mood, _ in MOOD_DEFINITIONS]
SENTIMENTS = MOOD_CATEGORIES + [NEUTRAL]


def detect_moods(text: Optional[str]) -> list[str]:
    """return every mood whose keywords appear in the text, in table order.
    none or empty text yields an empty list."""
    if not text:
        return []
    lowered = text.lower()
    return [
        mood for mood, keywords in MOOD_DEFINITIONS
        if any(keyword in lowered for keyword in keywords)
    ]


def get_sentiment(text: Optional[str]) -> str:
    """first detected mood, or neutral when nothing matches.
    superseded by the exact-one-match save policy, kept for previews."""
    moods = detect_moods(text)
    if not moods:
        return NEUTRAL
    return moods[0]


def resolve_sentiment(moods: list[str]) -> Optional[str]:
    """exact-one-match policy: neutral for none, the mood for one,
    None when the note is ambiguous (two or more moods)."""
    if len(moods) > 1:
        return None
    return moods[0] if moods else NEUTRAL
