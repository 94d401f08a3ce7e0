from pathlib import Path

with open(Path(__file__).parent / "__version__", "r") as f:
    VERSION = f.readline().rstrip()
