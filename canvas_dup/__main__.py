import sys

from .cli.duplicate import main

sys.exit(main())
