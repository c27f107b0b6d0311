"""Allow ``python -m sicpgen``."""

from sicpgen.cli import entrypoint

if __name__ == "__main__":
    entrypoint()
