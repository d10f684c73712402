import sys

from swaglint.cli import main

sys.exit(main())
