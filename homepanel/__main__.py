"""Allow running the demo with: python -m homepanel"""

import sys

from .demo import main

sys.exit(main())
