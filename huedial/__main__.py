import sys

from huedial.cli import main

sys.exit(main())
