"""
Entry Point Script (Bootstrap)
==============================
Development runner that sits outside the 'src' package.

It inserts 'src' into 'sys.path' so that 'import yplustool' resolves without
installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'yplustool.YPlusTool'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from yplustool.main import main

if __name__ == "__main__":
    sys.exit(main())
