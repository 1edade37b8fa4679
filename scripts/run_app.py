#!/usr/bin/env python
"""
Run the Streamlit cost calculator.

Usage:
    python scripts/run_app.py [--prices path/to/prices.csv]
"""
import os
import subprocess
import sys
from pathlib import Path


def main():
    # Get the UI module path
    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'vsaas_calculator' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    env = os.environ.copy()
    args = sys.argv[1:]
    if len(args) == 2 and args[0] == '--prices':
        prices = Path(args[1]).resolve()
        if not prices.exists():
            print(f"ERROR: Price table not found at {prices}")
            sys.exit(1)
        env['VSAAS_PRICE_TABLE'] = str(prices)

    # Run streamlit
    cmd = [sys.executable, '-m', 'streamlit', 'run', str(ui_path)]
    print(f"Starting Streamlit: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()
