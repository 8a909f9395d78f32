"""Allow ``python -m airpods_pro``."""

from airpods_pro.cli.main import main

if __name__ == "__main__":
    main()
