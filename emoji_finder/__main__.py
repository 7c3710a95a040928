import sys

from emoji_finder.cli import main

sys.exit(main())
