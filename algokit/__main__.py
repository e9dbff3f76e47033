import sys

from algokit.cli import main

sys.exit(main())
