import sys

from c8dis.cli import main

sys.exit(main())
