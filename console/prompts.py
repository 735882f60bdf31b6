from enum import Enum
from typing import Callable

InputFunc = Callable[[str], str]

SEPARATOR_WIDTH = 60


class ConsoleOutcome(Enum):
    """Mensaje que el bucle de consola devuelve a quien lo lanzó."""

    EXIT_KEEP_RUNNING = "exit_keep_running"
    SHUTDOWN = "shutdown"


class InputParseError(ValueError):
    """Entrada del operador que no se puede interpretar (p. ej. no numérica)."""


def read_line(input_func: InputFunc, prompt: str) -> str:
    return input_func(prompt).strip()


def read_int(input_func: InputFunc, prompt: str) -> int:
    raw = read_line(input_func, prompt)
    try:
        return int(raw)
    except ValueError:
        raise InputParseError(f"Not a number: {raw!r}") from None


def rule(char: str = "=", width: int = SEPARATOR_WIDTH) -> str:
    return char * width
