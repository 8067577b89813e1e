import sys

from rubikview.cli import main

sys.exit(main())
