"""Periodic alert sweep running alongside the API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from anyio import to_thread
from sqlalchemy.orm import Session

from ludoteca.application.use_cases.alerts import AlertJobReport, run_alert_jobs
from ludoteca.config import Settings, get_settings

logger = logging.getLogger(__name__)


class AlertScheduler:
    """Run :func:`run_alert_jobs` every ``alerts_check_interval_seconds``.

    The sweep is blocking database work, so each run happens in a worker
    thread with a session of its own. A failed run is logged and the loop
    keeps going.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        settings: Settings | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._settings = settings or get_settings()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run_forever())
        logger.info(
            "Alert scheduler started (every %s seconds)",
            self._settings.alerts_check_interval_seconds,
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Alert scheduler stopped")

    def run_once(self) -> AlertJobReport:
        """Execute one sweep synchronously with a fresh session."""

        session = self._session_factory()
        try:
            return run_alert_jobs(session, self._settings)
        finally:
            session.close()

    async def _run_forever(self) -> None:
        while True:
            try:
                await to_thread.run_sync(self.run_once)
            except Exception:
                logger.exception("Alert sweep failed; retrying on the next tick")
            await asyncio.sleep(self._settings.alerts_check_interval_seconds)


__all__ = ["AlertScheduler"]
