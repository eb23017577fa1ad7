from __future__ import annotations

import pytest

from mdconv.domain.models import RenderResult, ViewMode
from mdconv.services.render_pipeline import RenderPipeline
from mdconv.services.ui.presenters.main_presenter import IMainView, MainPresenter
from mdconv.utils.constants import DEMO_MARKDOWN

# ------------------------------
# Fakes
# ------------------------------


class FakeView:
    """In-memory view recording what the presenter pushed."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.results: list[RenderResult] = []
        self.views: list[ViewMode] = []

    def get_editor_text(self) -> str:
        return self.text

    def set_editor_text(self, text: str) -> None:
        self.text = text

    def show_render(self, result: RenderResult) -> None:
        self.results.append(result)

    def set_active_view(self, mode: ViewMode) -> None:
        self.views.append(mode)


class CountingPipeline(RenderPipeline):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def render(self, markdown_text: str) -> RenderResult:
        self.calls.append(markdown_text)
        return super().render(markdown_text)


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def counting() -> CountingPipeline:
    return CountingPipeline()


@pytest.fixture()
def presenter(view: FakeView, counting: CountingPipeline) -> MainPresenter:
    p = MainPresenter(view=view, pipeline=counting)
    p.start()
    return p


# ------------------------------
# Tests
# ------------------------------


def test_fake_view_satisfies_protocol(view: FakeView):
    assert isinstance(view, IMainView)


def test_start_renders_current_text_and_shows_initial_view(view: FakeView, counting):
    view.text = "# Hi"
    p = MainPresenter(view=view, pipeline=counting, initial_view=ViewMode.CODE)
    p.start()

    assert counting.calls == ["# Hi"]
    assert view.results[-1].source == "# Hi"
    assert view.views == [ViewMode.CODE]
    assert p.state.active_view is ViewMode.CODE
    assert p.state.document.revision == 1


def test_each_edit_renders_once_and_bumps_revision(presenter, view, counting):
    presenter.on_text_changed("# A")
    presenter.on_text_changed("# AB")

    assert counting.calls == ["", "# A", "# AB"]
    assert presenter.state.document.text == "# AB"
    assert presenter.state.document.revision == 3


def test_unchanged_text_does_not_rerender(presenter, view, counting):
    presenter.on_text_changed("same")
    presenter.on_text_changed("same")
    assert counting.calls.count("same") == 1
    assert len(view.results) == 2  # start + one edit


def test_view_switch_never_renders(presenter, view, counting):
    before = list(counting.calls)
    presenter.select_view(ViewMode.CODE)
    presenter.select_view("preview")
    presenter.select_view(ViewMode.PREVIEW)  # already active

    assert counting.calls == before
    assert view.views == [ViewMode.PREVIEW, ViewMode.CODE, ViewMode.PREVIEW]


def test_invalid_view_mode_is_rejected(presenter):
    with pytest.raises(ValueError):
        presenter.select_view("split")


def test_last_edit_wins_and_outputs_match(presenter, view):
    edits = ["#", "# T", "# Ti", "# Tit", "# Title"]
    for text in edits:
        presenter.on_text_changed(text)

    last = view.results[-1]
    assert last.source == "# Title"
    assert presenter.state.document.text == "# Title"
    assert presenter.state.html == last.html
    assert last.html == '<h1 class="text-4xl font-bold mb-4">Title</h1>'
    # preview tree and code come from the same pass
    assert last.tree[0].text == "Title"


def test_load_demo_sets_text_and_renders_once(presenter, view, counting):
    presenter.load_demo()

    assert view.text == DEMO_MARKDOWN
    assert counting.calls.count(DEMO_MARKDOWN) == 1
    assert view.results[-1].source == DEMO_MARKDOWN
    assert "Sample Markdown" in presenter.state.html
