from pathlib import Path

DATA_DIR = Path("data")


def default_input_path(day: int) -> Path:
    return DATA_DIR / f"day{day}.txt"


def read_input(file_path: str | Path) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def read_lines(file_path: str | Path) -> list[str]:
    return [line for line in read_input(file_path).splitlines() if line.strip()]
