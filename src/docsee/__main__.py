import sys

from docsee.main import main

sys.exit(main())
