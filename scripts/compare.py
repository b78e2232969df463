#!/usr/bin/env python3
"""
compare.py
==========
Run an ICE vs BEV comparison from the command line without installing
the package:

    python scripts/compare.py --ice-weight 1750 --bev-weight 1900 --alpha-fuel 2.7

See emissions/cli.py for all options.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from emissions.cli import main


if __name__ == "__main__":
    sys.exit(main())
