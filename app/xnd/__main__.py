"""Allow running xnd as ``python -m xnd``."""

from xnd.cli.main import app

if __name__ == "__main__":
    app(prog_name="xnd")
