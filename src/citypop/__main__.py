from __future__ import annotations

from citypop.ui.cli import run

run()
