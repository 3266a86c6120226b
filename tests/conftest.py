import pathlib
import sys

# flat module layout: make the repo root importable without installing
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
