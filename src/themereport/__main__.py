"""Entry point for `python -m themereport`."""

from themereport.presentation.cli.main import main

if __name__ == "__main__":
    main()
