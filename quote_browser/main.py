"""Quote Browser - launches the Streamlit app."""

import sys
from pathlib import Path

from loguru import logger
from streamlit.web import cli as stcli

APP_PATH = Path(__file__).parent / "app" / "main.py"


def main() -> None:
    """Run `streamlit run` on the quote screen, forwarding extra arguments."""
    logger.info(f"Starting Quote Browser from {APP_PATH}")
    sys.argv = ["streamlit", "run", str(APP_PATH), *sys.argv[1:]]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
