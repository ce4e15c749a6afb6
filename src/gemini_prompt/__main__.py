"""Interactive runner: ``python -m gemini_prompt`` or ``gemini-prompt``."""

import asyncio
import sys

from .completion import GeminiCompletionService
from .config import load_settings
from .prompt_loop import LineReader, run_prompt_loop

async def _run() -> int:
    service = GeminiCompletionService(load_settings())
    try:
        with LineReader() as reader:
            return await run_prompt_loop(reader, service)
    finally:
        await service.aclose()

def main() -> int:
    try:
        return asyncio.run(_run())
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130

if __name__ == "__main__":
    sys.exit(main())
