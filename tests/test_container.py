from __future__ import annotations

from pathlib import Path

from mdconv.di.container import Container
from mdconv.domain.models import ViewMode
from mdconv.services.config.app_config import build_app_config
from mdconv.services.render_pipeline import RenderPipeline
from mdconv.services.settings_service import SettingsService
from mdconv.services.ui.main_window import MainWindow


def _config(tmp_path: Path, body: str):
    ini = tmp_path / "explicit.ini"
    ini.write_text(body, encoding="utf-8")
    return build_app_config(explicit_ini=ini, project_root=tmp_path / "repo")


def test_container_wires_services(qsettings, tmp_path: Path):
    c = Container(qsettings=qsettings, config=_config(tmp_path, "[app]\nversion = 1.0.0\n"))
    assert isinstance(c.pipeline, RenderPipeline)
    assert isinstance(c.settings_service, SettingsService)
    assert c.config.debounce_ms() == 150


def test_initial_view_falls_back_to_config(qsettings, tmp_path: Path):
    c = Container(qsettings=qsettings, config=_config(tmp_path, "[preview]\ndefault_view = code\n"))
    assert c.initial_view() is ViewMode.CODE


def test_initial_view_prefers_stored_tab(qsettings, tmp_path: Path):
    c = Container(qsettings=qsettings, config=_config(tmp_path, "[preview]\ndefault_view = code\n"))
    c.settings_service.set_active_view("preview")
    assert c.initial_view() is ViewMode.PREVIEW


def test_initial_view_ignores_garbage_in_settings(qsettings, tmp_path: Path):
    c = Container(qsettings=qsettings, config=_config(tmp_path, "[app]\nversion = 1.0.0\n"))
    c.settings_service.set_active_view("split")
    assert c.initial_view() is ViewMode.PREVIEW


def test_build_main_window_renders_start_text(qapp, qsettings, tmp_path: Path):
    c = Container(
        qsettings=qsettings,
        config=_config(tmp_path, "[preview]\ndebounce_ms = 0\ndefault_view = code\n"),
    )
    win = c.build_main_window(start_text="# Hello", app_title="Title")

    assert isinstance(win, MainWindow)
    assert win.windowTitle() == "Title"
    assert win.editor.toPlainText() == "# Hello"
    assert win.code_view.toPlainText() == '<h1 class="text-4xl font-bold mb-4">Hello</h1>'
    assert win.active_view() is ViewMode.CODE
    win.close()
