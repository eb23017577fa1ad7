from __future__ import annotations

from typing import Protocol, runtime_checkable

from mdconv.domain.interfaces import IRenderPipeline
from mdconv.domain.models import MarkdownDocument, RenderResult, ViewMode, ViewState
from mdconv.utils.constants import DEMO_MARKDOWN
from mdconv.utils.logger import get_logger

log = get_logger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Passive view surface (implemented by the Qt MainWindow)."""

    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...

    # preview + code are always updated together from one result
    def show_render(self, result: RenderResult) -> None: ...
    def set_active_view(self, mode: ViewMode) -> None: ...


class MainPresenter:
    """
    Keeps the preview and the HTML code in step with the editor.

    Every accepted edit becomes a new document revision and exactly one render
    pass; the view receives that pass's RenderResult as a unit. Selecting a tab
    never re-renders.
    """

    def __init__(
        self,
        view: IMainView,
        pipeline: IRenderPipeline,
        *,
        initial_view: ViewMode = ViewMode.PREVIEW,
    ) -> None:
        self.view = view
        self.pipeline = pipeline
        self.state = ViewState(active_view=ViewMode(initial_view))
        self.last_result: RenderResult | None = None

    def start(self) -> None:
        self._render(self.view.get_editor_text())
        self.view.set_active_view(self.state.active_view)

    def on_text_changed(self, text: str) -> None:
        if self.last_result is not None and text == self.state.document.text:
            return
        self._render(text)

    def select_view(self, mode: ViewMode | str) -> None:
        mode = ViewMode(mode)
        if mode is self.state.active_view:
            return
        self.state.active_view = mode
        self.view.set_active_view(mode)

    def load_demo(self) -> None:
        self.view.set_editor_text(DEMO_MARKDOWN)
        # The editor signal may already have delivered this text; the check above dedupes it.
        self.on_text_changed(DEMO_MARKDOWN)

    def _render(self, text: str) -> None:
        self.state.document = MarkdownDocument(
            text=text, revision=self.state.document.revision + 1
        )
        result = self.pipeline.render(text)
        self.state.html = result.html
        self.last_result = result
        log.debug("Revision %d rendered", self.state.document.revision)
        self.view.show_render(result)
