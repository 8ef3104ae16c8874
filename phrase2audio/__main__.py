"""
Entry point for the phrase2audio package when run as a module.

This allows the package to be executed directly with:
    python -m phrase2audio < phrases.txt
"""

from .cli import main

if __name__ == "__main__":
    main()
