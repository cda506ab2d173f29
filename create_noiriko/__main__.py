import sys

from create_noiriko.cli import main

sys.exit(main())
