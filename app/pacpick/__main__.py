"""Allow running pacpick as ``python -m pacpick``.

The fzf key bindings re-invoke the program this way.
"""

from pacpick.cli.main import app

if __name__ == "__main__":
    app(prog_name="pacpick")
