"""
Detect Japanese string literals hardcoded in Flutter/Dart sources.

Usage:
    python -m tools.find_japanese_hardcoded_strings [DIR ...]

Japanese in // comments, debugPrint(), print() and Exception() calls is
ignored unless --include-comments is given. The script exits with a non-zero
status code when any hardcoded literal is found, so it can gate CI.
"""

import sys

from l10n_audit.cli import find_hardcoded_main


if __name__ == "__main__":
    sys.exit(find_hardcoded_main())
