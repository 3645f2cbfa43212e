# -*- coding: utf-8 -*-
"""Allow ``python -m pseudogeoref``."""

import sys

from pseudogeoref.cli import main

if __name__ == "__main__":
    sys.exit(main())
