"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Facade re-exporting the command handlers.
    - ``handlers/*``: Implementation of each command.
"""
