from pathlib import Path

PATH = str(Path(__file__).parent)
