"""
CLI Subpackage.

Contains the command-line entry point used to check and inspect enum
definitions stored as JSON files.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Command handlers.
"""
