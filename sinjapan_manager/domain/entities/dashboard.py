"""Dashboard greeting."""

MORNING = "おはようございます"
AFTERNOON = "こんにちは"
EVENING = "こんばんは"


def greeting_for_hour(hour: int) -> str:
    """Greeting for a local hour (0-23): morning before 12, afternoon before 18."""
    if hour < 12:
        return MORNING
    if hour < 18:
        return AFTERNOON
    return EVENING
