import sys

from floydpar.cli import main

sys.exit(main())
