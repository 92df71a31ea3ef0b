"""Assistant suggestions gated on the assistant API key."""

from __future__ import annotations

import random

from weatherhub.credentials import Credentials

MISSING_KEY_MESSAGE = "Please add an AI API key in settings to get personalized suggestions."

SUGGESTIONS = (
    "Based on the current weather conditions, I recommend staying hydrated and wearing light, breathable fabrics.",
    "The atmospheric pressure suggests a great day for outdoor activities. Consider a morning walk or bike ride!",
    "Current humidity levels indicate you might want to use a moisturizer and drink extra water today.",
    "The UV index is moderate - perfect for outdoor activities with proper sun protection.",
    "Energy-saving tip: With these temperatures, you can reduce AC usage by opening windows during cooler hours.",
)


def generate_suggestion(
    prompt: str,
    credentials: Credentials,
    rng: random.Random | None = None,
) -> str:
    """Return a suggestion for ``prompt``.

    The prompt is not sent anywhere yet; a canned suggestion is picked.
    """
    if not credentials.has_assistant:
        return MISSING_KEY_MESSAGE
    return (rng or random).choice(SUGGESTIONS)
