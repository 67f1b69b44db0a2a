import sys

from lowpoly.cli import main

sys.exit(main())
