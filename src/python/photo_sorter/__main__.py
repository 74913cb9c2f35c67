import sys

from photo_sorter.cli import main

sys.exit(main())
