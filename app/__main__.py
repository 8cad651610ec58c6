from pathlib import Path
import sys

from streamlit.web import cli as stcli


def main() -> None:
    """Launch the InsightPlan dashboard via `python -m app`."""
    script = Path(__file__).resolve().parents[1] / "streamlit_app.py"
    sys.argv = ["streamlit", "run", str(script)]
    stcli.main()


if __name__ == "__main__":
    main()
