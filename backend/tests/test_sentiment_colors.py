# tests for the sentiment colour lookup

from moodjournal.services.mood_classifier import SENTIMENTS
from moodjournal.services.sentiment_colors import NEUTRAL_COLOR, SENTIMENT_COLORS, sentiment_color


class TestSentimentColors:

    def test_every_sentiment_has_a_colour(self):
        assert set(SENTIMENT_COLORS) == set(SENTIMENTS)

    def test_known_sentiment(self):
        assert sentiment_color("happy") == "#d4f8d4"
        assert sentiment_color("in_love") == "#ffd6e7"

    def test_neutral(self):
        assert sentiment_color("neutral") == NEUTRAL_COLOR == "#f0f0f0"

    def test_unknown_falls_back_to_neutral(self):
        assert sentiment_color("melancholic") == NEUTRAL_COLOR
        assert sentiment_color("") == NEUTRAL_COLOR
        assert sentiment_color(None) == NEUTRAL_COLOR
