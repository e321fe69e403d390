import sys

from eseries.cli import main

sys.exit(main())
