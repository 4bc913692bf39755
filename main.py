"""Main entry point for filecrypt.

Allows running the tool with `python main.py <command>` from the project root.
"""

from filecrypt.cli import main


if __name__ == "__main__":
    main()
