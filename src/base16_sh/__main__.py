"""Allow ``python -m base16_sh``."""

from base16_sh.cli import main

if __name__ == "__main__":
    main()
