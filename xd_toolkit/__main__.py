import sys

from xd_toolkit.cli import main

sys.exit(main())
