import sys

from missionsim.cli import main

if __name__ == "__main__":
    sys.exit(main())
