"""Entry point for the arquillian-scaffold package."""

import sys
from arquillian_scaffold.cli import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
