"""Module entrypoint for `python -m workflow_validator.linter`.

Delegates to the validator CLI implementation.
"""

from .run_lint import main


if __name__ == "__main__":
    main()
