import sys

from pullem.cli.main import main

sys.exit(main())
