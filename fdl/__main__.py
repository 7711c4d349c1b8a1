import sys

from fdl.main import main

sys.exit(main())
