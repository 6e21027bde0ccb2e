"""Entry point for running rbshuffle as a module.

This file allows rbshuffle to be run with: python -m rbshuffle
"""

from rbshuffle.app import main

if __name__ == "__main__":
    main()
