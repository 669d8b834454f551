"""
Compare the keys of the per-language ARB files (English and Japanese by default).

Usage:
    python -m tools.check_arb_keys
    python -m tools.check_arb_keys --lang en=lib/l10n/app_en.arb --lang ja=lib/l10n/app_ja.arb

Reports each language's key count, the keys missing per language, keys that
exist in only some languages and keys unique to each language. A missing ARB
file aborts the run with a non-zero status code.
"""

import sys

from l10n_audit.cli import check_arb_keys_main


if __name__ == "__main__":
    sys.exit(check_arb_keys_main())
