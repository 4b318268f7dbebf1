"""Command line entry point: read words from a file and write the chain found."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from wordloop.chain import WordError, solve

DEFAULT_INPUT = "InputFile.txt"
DEFAULT_OUTPUT = "OutputFile.txt"
_NO_SOLUTION = "Решений не существует!"


def run(input_path: str | Path = DEFAULT_INPUT, output_path: str | Path = DEFAULT_OUTPUT) -> bool:
    """Solve the puzzle for the words in ``input_path``; True if a chain was written."""
    input_path = Path(input_path)
    output_path = Path(output_path)
    try:
        if not input_path.exists():
            input_path.write_text("", encoding="utf-8")
            output_path.write_text("", encoding="utf-8")
            print(
                f'Файлы "{input_path.name}" и "{output_path.name}" '
                "были созданы в рабочей директории."
            )
            return False

        words = input_path.read_text(encoding="utf-8-sig").split()
        if not words:
            output_path.write_text("", encoding="utf-8")
            raise WordError(f'Файл "{input_path.name}" не содржит не одного слова!')

        chain = solve(words)
        if chain is None:
            print(_NO_SOLUTION)
            output_path.write_text("", encoding="utf-8")
            return False

        print(f'Решение успешно найденно! Результат сохранён в "{output_path.name}"')
        output_path.write_text(
            "".join(f"{word} " for word in chain), encoding="utf-8-sig"
        )
        return True
    except WordError as error:
        print(f"Ошибка: {error}")
        print("Не удалось решить задачу.")
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the solver."""
    parser = argparse.ArgumentParser(
        description="Arrange words into a closed chain of last and first letters."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    run(args.input, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())