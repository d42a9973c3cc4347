from pathlib import Path
import sys

# Ensure the repository root (with the 'utils' package) is on PYTHONPATH when run from examples/
sys.path.append(str(Path(__file__).resolve().parents[1]))

from utils.settings import load_settings
from main import run


def main():
    examples_dir = Path(__file__).resolve().parent
    settings_path = examples_dir / "settings.sample.json"
    out_path = examples_dir / "report.sample.txt"

    settings = load_settings(settings_path)
    lines = run(settings)
    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote report to {out_path}")


if __name__ == "__main__":
    main()
