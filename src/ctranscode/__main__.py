"""Allow running ctranscode as ``python -m ctranscode``."""

from ctranscode.cli import main

if __name__ == "__main__":
    main()
