"""Minimal interactive runner."""

import sys
sys.path.insert(0, 'src')  # run from a checkout without installing

from gemini_prompt.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
