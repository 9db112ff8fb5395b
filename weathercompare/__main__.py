import sys

from weathercompare.cli import main

sys.exit(main())
