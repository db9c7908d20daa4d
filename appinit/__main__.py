import sys

from appinit.cli import main

sys.exit(main())
