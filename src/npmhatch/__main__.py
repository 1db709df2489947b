"""Allow ``python -m npmhatch``."""

from npmhatch.cli import app


if __name__ == "__main__":
    app(prog_name="npmhatch")
