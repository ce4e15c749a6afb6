"""Interactive Gemini prompt loop."""

from .completion import CompletionError, GeminiCompletionService
from .config import Settings, load_settings
from .prompt_loop import LineReader, ReaderClosedError, run_prompt_loop

__all__ = [
    "CompletionError",
    "GeminiCompletionService",
    "LineReader",
    "ReaderClosedError",
    "Settings",
    "load_settings",
    "run_prompt_loop",
]
