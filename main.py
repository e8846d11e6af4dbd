"""Entry point for looking up classes in the Javadoc archives of this checkout."""

from src.javadoc_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
