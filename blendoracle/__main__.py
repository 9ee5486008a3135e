import sys

from blendoracle.cli import main

sys.exit(main())
