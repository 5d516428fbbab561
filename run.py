"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so that 'from forcegraph...' resolves against
   the local 'src' directory.

Usage:
    $ python run.py [--headless] [--ticks N]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from forcegraph.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
