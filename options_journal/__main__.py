import sys

from options_journal.cli import main

sys.exit(main())
