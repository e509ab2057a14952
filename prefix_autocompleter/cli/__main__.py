import sys

from prefix_autocompleter.cli.cli import main

sys.exit(main())
