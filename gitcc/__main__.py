import sys

from gitcc.cli.main import main

sys.exit(main())
