"""Run with: python -m analogclock"""
import sys

from analogclock.main import main

if __name__ == "__main__":
    sys.exit(main())
