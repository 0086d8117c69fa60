"""
Run with: python -m yplustool
"""
import sys

from yplustool.main import main

if __name__ == "__main__":
    sys.exit(main())
