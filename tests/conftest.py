"""
Pytest configuration: put ``etl/`` on sys.path.

The pipeline modules live as plain modules in ``etl/`` and import each other
by bare name (``from ids_components import ...``), the same way they do when
a stage script is run as ``python etl/02_game_data.py``.
"""

import sys
from pathlib import Path


def _add_etl_to_sys_path():
    # tests/ -> repo root -> etl/
    etl = Path(__file__).resolve().parents[1] / "etl"
    etl_str = str(etl)
    if etl_str not in sys.path:
        sys.path.insert(0, etl_str)


_add_etl_to_sys_path()
