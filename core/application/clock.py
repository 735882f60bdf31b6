from datetime import datetime, timedelta
from typing import Callable

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


def next_timestamp(clock: Clock, previous: datetime | None = None) -> datetime:
    """
    Devuelve la hora actual, garantizando que sea estrictamente posterior a
    `previous` aunque el reloj no haya avanzado desde la última mutación.
    """
    now = clock()
    if previous is not None and now <= previous:
        return previous + _TICK
    return now
