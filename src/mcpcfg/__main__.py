# Entry point for python -m mcpcfg
import sys

from mcpcfg.cli import main

sys.exit(main())
