"""Print salted digests of text, stdin or files.

Just run: uv run python main.py FILE [FILE ...]
"""

import sys

from saltdigest.cli import main

if __name__ == "__main__":
    sys.exit(main())
