import sys

from .ocs01_setup import main

sys.exit(main())
