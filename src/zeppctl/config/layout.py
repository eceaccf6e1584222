"""InstallLayout — every filesystem location derived from one install root."""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from zeppctl.config.models import ZeppelinSettings


class InstallLayout(BaseModel):
    """Fixed set of paths for a Zeppelin sandbox under a Solr install root.

    Pure value object: nothing here touches the filesystem, callers check
    existence themselves.
    """

    model_config = ConfigDict(frozen=True)

    base_dir: Path
    archive_path: Path
    archive_url: str
    unpacked_dir: Path
    daemon_executable: Path
    interpreter_installer: Path
    interpreter_template: Path
    interpreter_output: Path
    unpack_log: Path

    @classmethod
    def from_root(
        cls,
        root: str | Path,
        settings: ZeppelinSettings | None = None,
        *,
        windows: bool | None = None,
    ) -> InstallLayout:
        """Compute the layout for *root*.

        ``windows`` selects the ``.cmd`` script variants; it defaults to the
        host platform.
        """
        settings = settings or ZeppelinSettings()
        if windows is None:
            windows = sys.platform == "win32"
        suffix = ".cmd" if windows else ".sh"

        root_path = Path(root).absolute()
        base_dir = root_path / "zeppelin"
        unpacked_dir = base_dir / settings.unpack_dir_name
        resources = root_path / "server" / "resources"

        return cls(
            base_dir=base_dir,
            archive_path=base_dir / settings.archive_name,
            archive_url=settings.archive_url,
            unpacked_dir=unpacked_dir,
            daemon_executable=unpacked_dir / "bin" / f"zeppelin-daemon{suffix}",
            interpreter_installer=unpacked_dir / "bin" / f"install-interpreter{suffix}",
            interpreter_template=resources / settings.interpreter_template_name,
            interpreter_output=resources / settings.interpreter_file_name,
            unpack_log=base_dir / "logs.txt",
        )
