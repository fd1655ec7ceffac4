"""Permite ejecutar la CLI con `python -m cli` (además del script `psn-trophies`)."""

from cli.main import run

run()
