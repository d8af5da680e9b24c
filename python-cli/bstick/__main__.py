import sys

from bstick.cli import main

sys.exit(main())
