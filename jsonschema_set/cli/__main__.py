"""Module entrypoint for `python -m jsonschema_set.cli`.

Delegates to the CLI implementation.
"""

from .run_cli import main


if __name__ == "__main__":
    main()
