"""Allow ``python -m escaperoom``."""

from escaperoom.main import main

if __name__ == "__main__":
    main()
