# background colour per sentiment for the history list

NEUTRAL_COLOR = "#f0f0f0"

SENTIMENT_COLORS: dict[str, str] = {
    "ecstatic": "#ffe66d",
    "happy": "#d4f8d4",
    "excited": "#c3e7ff",
    "calm": "#e3f2fd",
    "grateful": "#fff3cd",
    "proud": "#e0bbff",
    "in_love": "#ffd6e7",
    "hopeful": "#d1f2eb",
    "stressed": "#ffe0b2",
    "anxious": "#ffe4e1",
    "angry": "#ffcdd2",
    "frustrated": "#ffcc80",
    "sad": "#f8d4d4",
    "lonely": "#e1bee7",
    "tired": "#e0e0e0",
    "bored": "#f0f4c3",
    "confused": "#e6ee9c",
    "afraid": "#ffecb3",
    "neutral": NEUTRAL_COLOR,
}


def sentiment_color(sentiment) -> str:
    """colour for a sentiment tag, falling back to the neutral colour"""
    return SENTIMENT_COLORS.get(sentiment, NEUTRAL_COLOR)
