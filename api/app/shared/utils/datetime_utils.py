"""
Utilidades para manejo de fechas y horas.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional


# Resolución mínima de los timestamps persistidos
TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


class DateTimeUtils:
    """Clase de utilidades para operaciones con fechas y horas."""

    @staticmethod
    def now_utc() -> datetime:
        """
        Obtiene la fecha y hora actual en UTC.

        Returns:
            datetime: Fecha y hora actual en UTC
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
        """
        Normaliza un datetime a UTC.

        Algunos backends (SQLite) devuelven valores sin zona horaria;
        se interpretan como UTC.

        Args:
            dt: Objeto datetime, con o sin zona horaria

        Returns:
            Optional[datetime]: El mismo instante en UTC, o None
        """
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def next_after(candidate: datetime, previous: Optional[datetime]) -> datetime:
        """
        Retorna `candidate` si es posterior a `previous`; si no, el
        instante inmediatamente siguiente a `previous`.

        Args:
            candidate: Timestamp propuesto (normalmente "ahora")
            previous: Último timestamp conocido

        Returns:
            datetime: Timestamp estrictamente mayor que `previous`
        """
        candidate = DateTimeUtils.ensure_utc(candidate)
        previous = DateTimeUtils.ensure_utc(previous)
        if previous is None or candidate > previous:
            return candidate
        return previous + TIMESTAMP_RESOLUTION
