from __future__ import annotations

from PyQt6.QtCore import QByteArray, Qt, QTimer
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QStatusBar,
    QTabWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from mdconv.domain.interfaces import ISettingsService
from mdconv.domain.models import RenderResult, ViewMode
from mdconv.services.ui.presenters.main_presenter import MainPresenter
from mdconv.utils.constants import APP_NAME, CSS_PREVIEW, DEFAULT_DEBOUNCE_MS, HTML_TEMPLATE

_TAB_ORDER = (ViewMode.PREVIEW, ViewMode.CODE)


class MainWindow(QMainWindow):
    """Thin PyQt window: Markdown input on the left, preview/code tabs on the right."""

    def __init__(
        self,
        settings: ISettingsService,
        *,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.settings = settings
        self.presenter: MainPresenter | None = None

        # Input pane
        self.demo_button = QPushButton("Demo", self)
        self.editor = QPlainTextEdit(self)
        self.editor.setPlaceholderText("Enter your Markdown here...")
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        input_pane = QWidget(self)
        input_layout = QVBoxLayout(input_pane)
        input_layout.setContentsMargins(0, 0, 0, 0)
        input_layout.addWidget(QLabel("Markdown Input", input_pane))
        input_layout.addWidget(self.demo_button, alignment=Qt.AlignmentFlag.AlignLeft)
        input_layout.addWidget(self.editor)

        # Output pane
        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)
        self.code_view = QPlainTextEdit(self)
        self.code_view.setReadOnly(True)
        self.code_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

        self.tabs = QTabWidget(self)
        self.tabs.addTab(self.preview, "HTML Preview")
        self.tabs.addTab(self.code_view, "HTML Code")

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(input_pane)
        self.splitter.addWidget(self.tabs)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)
        self.setStatusBar(QStatusBar(self))

        # Debounced live preview; an interval of 0 renders on every edit.
        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(max(0, debounce_ms))
        self._debounce.timeout.connect(self._flush_edit)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.demo_button.clicked.connect(self._on_demo_clicked)
        self.tabs.currentChanged.connect(self._on_tab_changed)

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter
        presenter.start()

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def show_render(self, result: RenderResult) -> None:
        self.preview.setHtml(HTML_TEMPLATE.format(css=CSS_PREVIEW, body=result.html))
        self.code_view.setPlainText(result.html)

    def set_active_view(self, mode: ViewMode) -> None:
        self.tabs.setCurrentIndex(_TAB_ORDER.index(ViewMode(mode)))

    def active_view(self) -> ViewMode:
        return _TAB_ORDER[max(0, self.tabs.currentIndex())]

    # ---------- Slots ----------
    def _on_text_changed(self) -> None:
        if self._debounce.interval() == 0:
            self._flush_edit()
        else:
            self._debounce.start()

    def _flush_edit(self) -> None:
        self._debounce.stop()
        if self.presenter is not None:
            self.presenter.on_text_changed(self.editor.toPlainText())

    def _on_demo_clicked(self) -> None:
        if self.presenter is not None:
            self.presenter.load_demo()

    def _on_tab_changed(self, index: int) -> None:
        if self.presenter is not None and index >= 0:
            self.presenter.select_view(_TAB_ORDER[index])

    # ---------- Close ----------
    def closeEvent(self, event):
        # A pending debounced edit would otherwise be lost with the window.
        if self._debounce.isActive():
            self._flush_edit()
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        self.settings.set_active_view(self.active_view().value)
        super().closeEvent(event)
