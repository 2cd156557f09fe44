"""Allow `python -m ftf`."""

from ftf.cli.main import main

if __name__ == "__main__":
    main()
