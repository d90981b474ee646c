"""Allow envkit to be executable through `python -m envkit`."""
from envkit.cli import app


if __name__ == "__main__":  # pragma: no cover
    app(prog_name="envkit")
