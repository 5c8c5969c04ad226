"""Main entry point for scriptfold CLI when run as a module."""

from scriptfold.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
