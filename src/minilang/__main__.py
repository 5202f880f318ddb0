import sys

from minilang.cli import main

sys.exit(main())
