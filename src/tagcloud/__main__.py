"""Command-line entry: `python -m tagcloud`."""
from tagcloud.main import main


if __name__ == "__main__":
    main()
