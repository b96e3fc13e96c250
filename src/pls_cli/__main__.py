"""Allow running ``python -m pls_cli``."""

from pls_cli.main import main

if __name__ == "__main__":
    main()
