"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import zeppctl

    assert zeppctl.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from zeppctl.cli import main

    assert callable(main)


def test_subsystem_exports() -> None:
    from zeppctl.config import InstallLayout, SettingsLoader, ZeppelinSettings
    from zeppctl.install import (
        ArchiveFetcher,
        AssumeStopped,
        HttpLivenessCheck,
        LifecycleController,
        LivenessCheck,
    )
    from zeppctl.interpreter import InterpreterConfigDocument, InterpreterConfigurator
    from zeppctl.runtime import ProcessRunner, ensure_success

    for obj in (
        InstallLayout,
        SettingsLoader,
        ZeppelinSettings,
        ArchiveFetcher,
        AssumeStopped,
        HttpLivenessCheck,
        LifecycleController,
        LivenessCheck,
        InterpreterConfigDocument,
        InterpreterConfigurator,
        ProcessRunner,
        ensure_success,
    ):
        assert obj is not None
