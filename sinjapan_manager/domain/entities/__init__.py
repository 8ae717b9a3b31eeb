from .ai_feature import AIFeature
from .ai_request_log import AIRequestLog
from .completion import CompletionResult, GenerationResult, PromptMessage, TokenUsage
from .navigation import MenuItem, QuickAction
from .role import Role

__all__ = [
    "AIFeature",
    "AIRequestLog",
    "CompletionResult",
    "GenerationResult",
    "PromptMessage",
    "TokenUsage",
    "MenuItem",
    "QuickAction",
    "Role",
]
