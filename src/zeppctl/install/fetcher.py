"""ArchiveFetcher — downloads and unpacks the Zeppelin distribution.

Both steps are idempotent: they look for their result on disk first and do
nothing if it is already there.  Nothing checks that an existing archive or
unpacked directory is complete.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import DownloadError
from zeppctl.runtime.models import CommandInvocation
from zeppctl.runtime.runner import ProcessRunner, ensure_success
from zeppctl.utils.telemetry import ATTR_URL, get_tracer

if TYPE_CHECKING:
    from zeppctl.config.layout import InstallLayout

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

_CHUNK_SIZE = 1024 * 1024


class ArchiveFetcher:
    """Fetches the pinned Zeppelin archive and extracts it next to itself."""

    def __init__(
        self,
        runner: ProcessRunner,
        settings: ZeppelinSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._runner = runner
        self._settings = settings or ZeppelinSettings()
        self._transport = transport

    async def ensure_downloaded(self, layout: InstallLayout) -> None:
        """Download the archive unless it is already on disk.

        The body is streamed into a ``.part`` file that only replaces the
        final path once the transfer finished, so an interrupted download is
        never mistaken for a complete archive.
        """
        if layout.archive_path.exists():
            logger.debug("Archive already present at %s", layout.archive_path)
            return

        logger.info("Downloading zeppelin; this may take a few minutes")
        partial = layout.archive_path.with_name(layout.archive_path.name + ".part")

        with _tracer.start_as_current_span("zeppctl.download") as span:
            span.set_attribute(ATTR_URL, layout.archive_url)
            try:
                # Bounds each connect and read, not the whole transfer.
                timeout = httpx.Timeout(self._settings.download_timeout)
                async with httpx.AsyncClient(
                    transport=self._transport, follow_redirects=True, timeout=timeout
                ) as client:
                    async with client.stream("GET", layout.archive_url) as response:
                        response.raise_for_status()
                        with partial.open("wb") as fh:
                            async for chunk in response.aiter_bytes(_CHUNK_SIZE):
                                fh.write(chunk)
                partial.replace(layout.archive_path)
            except (httpx.HTTPError, OSError) as exc:
                partial.unlink(missing_ok=True)
                raise DownloadError(layout.archive_url, str(exc)) from exc

        logger.info("Downloaded %s", layout.archive_path)

    async def ensure_unpacked(self, layout: InstallLayout) -> None:
        """Extract the archive into the base directory unless already done.

        Extractor output goes to ``layout.unpack_log``; the log is removed on
        success and left behind for diagnosis on failure.
        """
        if layout.unpacked_dir.exists():
            logger.debug("Archive already unpacked at %s", layout.unpacked_dir)
            return

        invocation = CommandInvocation(
            executable=self._settings.extract_command[0],
            args=[*self._settings.extract_command[1:], str(layout.archive_path)],
            cwd=layout.base_dir,
            log_path=layout.unpack_log,
        )
        outcome = await self._runner.run(invocation)
        ensure_success(invocation, outcome)

        logger.info("Zeppelin successfully downloaded and unpacked to %s", layout.base_dir)
        layout.unpack_log.unlink(missing_ok=True)
