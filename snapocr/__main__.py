import sys

from snapocr.main import main

sys.exit(main())
