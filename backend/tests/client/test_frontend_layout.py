"""Frontend script layout — the Streamlit entry point must not shadow `app`.

Invariants:
    - `streamlit run` puts the script's directory first on sys.path, so nothing
      in frontend/ may resolve as the top-level `app` module
"""

from importlib.machinery import PathFinder
from pathlib import Path

FRONTEND_DIR = Path(__file__).resolve().parents[3] / "frontend"


def test_streamlit_entry_point_exists():
    assert (FRONTEND_DIR / "streamlit_app.py").is_file()


def test_frontend_dir_does_not_shadow_app_package():
    assert PathFinder.find_spec("app", [str(FRONTEND_DIR)]) is None
