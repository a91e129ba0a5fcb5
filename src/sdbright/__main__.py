import sys

from sdbright.cli import main

sys.exit(main())
