import sys

from rjsconfig.cli import main

sys.exit(main())
