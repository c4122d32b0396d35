from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from semtable.cli.main import run_pipeline


def main() -> None:
    session, report, path = run_pipeline(root / "data" / "inputs.json", root / "outputs")
    print(report)
    print(f"session {session.session_id} written to {path}")


if __name__ == "__main__":
    # The typer app is also available as `semtable` or `python -m semtable.cli.main`.
    main()
