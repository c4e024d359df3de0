"""Allow ``python -m perch``."""

from perch.cli import main

if __name__ == "__main__":
    main()
