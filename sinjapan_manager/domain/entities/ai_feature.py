from enum import Enum


class AIFeature(str, Enum):
    """Generation features offered by the AI collaborator."""

    TASKS = "tasks"
    STUDY = "study"
    TRANSLATION = "translation"
    SEO_ARTICLE = "seo_article"
    CHAT = "chat"
