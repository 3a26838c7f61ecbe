"""Main entry point when executing exfs as a package.

This allows running the package using python -m exfs.
"""

from exfs.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
