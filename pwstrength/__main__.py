import sys

from pwstrength.cli import main

sys.exit(main())
