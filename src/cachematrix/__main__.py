"""Command-line entry point: ``python -m cachematrix``."""
from cachematrix.main import main

if __name__ == "__main__":
    main()
