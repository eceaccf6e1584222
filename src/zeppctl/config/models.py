"""Settings for a Zeppelin sandbox install.

All the pinned values (version, mirror, plugin coordinates, timeouts) live
here so a single :class:`ZeppelinSettings` instance can be built at startup
and handed to every component.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ZeppelinSettings(BaseModel):
    """Configuration for downloading, running, and configuring Zeppelin."""

    version: str = Field(default="0.9.0", description="Zeppelin release to install.")
    install_type: str = Field(default="netinst", description="Distribution flavour ('netinst' or 'all').")
    mirror_base: str = Field(
        default="https://archive.apache.org/dist/zeppelin/zeppelin-{version}/",
        description="Directory URL holding the release; '{version}' is substituted.",
    )
    process_timeout: float = Field(default=90.0, gt=0, description="Max seconds to wait for any external command.")
    download_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Max seconds to wait on the mirror for a connection or for the next chunk of the archive.",
    )
    terminate_grace: float = Field(
        default=5.0, ge=0, description="Seconds between terminating and killing a timed-out command."
    )
    extract_command: list[str] = Field(
        default_factory=lambda: ["tar", "-xvf"],
        min_length=1,
        description="Command (without the archive path) used to unpack the archive.",
    )
    interpreter_name: str = Field(default="solr", description="Name passed to install-interpreter.")
    interpreter_artifact: str = Field(
        default="com.lucidworks.zeppelin:zeppelin-solr:0.1.6",
        description="Maven coordinates of the interpreter plugin.",
    )
    interpreter_template_name: str = Field(default="zeppelin-solr-interpreter.json.template")
    interpreter_file_name: str = Field(default="zeppelin-solr-interpreter.json")
    solr_url_placeholder: str = Field(default="@@SOLR_URL@@")
    zeppelin_url: str = Field(default="http://localhost:8080", description="Default Zeppelin base URL.")
    readiness_attempts: int = Field(default=30, ge=1)
    readiness_delay: float = Field(default=2.0, ge=0)

    @property
    def unpack_dir_name(self) -> str:
        return f"zeppelin-{self.version}-bin-{self.install_type}"

    @property
    def archive_name(self) -> str:
        return f"{self.unpack_dir_name}.tgz"

    @property
    def archive_url(self) -> str:
        base = self.mirror_base.format(version=self.version)
        if not base.endswith("/"):
            base += "/"
        return base + self.archive_name
