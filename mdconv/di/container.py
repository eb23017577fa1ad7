from __future__ import annotations

from PyQt6.QtCore import QSettings

from mdconv.domain.interfaces import IAppConfig, IRenderPipeline, ISettingsService
from mdconv.domain.models import ViewMode
from mdconv.services.config.app_config import build_app_config
from mdconv.services.render_pipeline import RenderPipeline
from mdconv.services.settings_service import SettingsService
from mdconv.services.ui.main_window import MainWindow
from mdconv.services.ui.presenters.main_presenter import IMainView, MainPresenter
from mdconv.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services (config, render pipeline, settings) if not provided
      - Builds the main window with its presenter attached
    """

    def __init__(
        self,
        pipeline: IRenderPipeline | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        config: IAppConfig | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.pipeline: IRenderPipeline = pipeline or RenderPipeline()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    def initial_view(self) -> ViewMode:
        """Last tab the user had open, else the configured default."""
        stored = self.settings_service.get_active_view()
        try:
            return ViewMode(stored)
        except ValueError:
            return ViewMode(self.config.default_view())

    # ---------- UI factories ----------

    def build_main_presenter(self, view: IMainView) -> MainPresenter:
        return MainPresenter(view=view, pipeline=self.pipeline, initial_view=self.initial_view())

    def build_main_window(self, *, start_text: str = "", app_title: str = APP_NAME) -> MainWindow:
        window = MainWindow(
            settings=self.settings_service,
            debounce_ms=self.config.debounce_ms(),
            app_title=app_title,
        )
        if start_text:
            window.set_editor_text(start_text)
        window.attach_presenter(self.build_main_presenter(view=window))
        return window
