"""InterpreterConfigurator — renders the Solr interpreter setting and pushes
it to Zeppelin's REST API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel

from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import (
    HttpStatusError,
    HttpTransportError,
    InterpreterWriteError,
    TemplateReadError,
)
from zeppctl.utils.telemetry import ATTR_HTTP_STATUS, ATTR_URL, get_tracer

if TYPE_CHECKING:
    from zeppctl.config.layout import InstallLayout

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

SETTING_ENDPOINT = "/api/interpreter/setting"


class InterpreterConfigDocument(BaseModel):
    """A rendered interpreter setting and where it gets written."""

    text: str
    output_path: Path


class InterpreterConfigurator:
    """Creates the ``solr`` interpreter setting on a running Zeppelin."""

    def __init__(
        self,
        layout: InstallLayout,
        settings: ZeppelinSettings | None = None,
    ) -> None:
        self._layout = layout
        self._settings = settings or ZeppelinSettings()

    def render(self, template_path: Path, solr_url: str) -> str:
        """Return the template text with every placeholder replaced by *solr_url*.

        The placeholder is matched literally; nothing else in the template is
        interpreted.
        """
        try:
            template = template_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateReadError(str(template_path), str(exc)) from exc
        return template.replace(self._settings.solr_url_placeholder, solr_url)

    def build_document(self, solr_url: str) -> InterpreterConfigDocument:
        text = self.render(self._layout.interpreter_template, solr_url)
        return InterpreterConfigDocument(text=text, output_path=self._layout.interpreter_output)

    async def publish(self, zeppelin_url: str, document: InterpreterConfigDocument) -> None:
        """Write *document* to disk and POST it to Zeppelin.

        The written file is always removed afterwards, whether or not the
        request succeeded.

        Raises:
            InterpreterWriteError: If the document cannot be written.
            HttpStatusError: If Zeppelin answers with a status >= 300.
            HttpTransportError: If no response is received at all.
        """
        url = zeppelin_url.rstrip("/") + SETTING_ENDPOINT
        path = document.output_path

        try:
            try:
                path.write_text(document.text, encoding="utf-8")
                payload = path.read_bytes()
            except OSError as exc:
                raise InterpreterWriteError(str(path), str(exc)) from exc

            logger.info("POSTing solr interpreter update to %s", url)
            logger.debug("POST entity will be file: %s", path)
            await self._post(url, payload)
        finally:
            path.unlink(missing_ok=True)

        logger.info("Successfully created Solr interpreter")

    async def update(self, zeppelin_url: str, solr_url: str) -> None:
        """Render the template for *solr_url* and publish it to *zeppelin_url*."""
        await self.publish(zeppelin_url, self.build_document(solr_url))

    @staticmethod
    async def _post(url: str, payload: bytes) -> None:
        # TODO look up existing settings and PUT to the matching id so reruns update instead of duplicating.
        with _tracer.start_as_current_span("zeppctl.interpreter.publish") as span:
            span.set_attribute(ATTR_URL, url)
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        url,
                        content=payload,
                        headers={"Content-Type": "application/json"},
                    )
            except httpx.HTTPError as exc:
                raise HttpTransportError(url, str(exc)) from exc

            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)
            if response.status_code >= 300:
                raise HttpStatusError(url, response.status_code, response.text)
