import sys

from tick_snake.cli import main

sys.exit(main())
