import sys

from chess_tui.main import main

sys.exit(main())
