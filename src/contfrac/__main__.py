import sys

from contfrac.cli import main

if __name__ == "__main__":
    sys.exit(main())
