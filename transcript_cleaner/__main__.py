"""Package entry point for ``python -m transcript_cleaner``.

WHY: Users run the cleaner as ``python -m transcript_cleaner notes.md``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from transcript_cleaner.cli import main

if __name__ == "__main__":
    main()
