"""Package entry point for ``python -m reabank_numberer``.

WHY: Users run the numberer as ``python -m reabank_numberer Reaticulate.reabank``
without needing the console script on their PATH.

HOW: Delegates to the CLI's main() and exits with its return code.
"""

import sys

from reabank_numberer.cli import main

if __name__ == "__main__":
    sys.exit(main())
