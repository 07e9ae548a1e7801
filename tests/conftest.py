import pytest

from wordgraph.graph_build import GraphStore

EASY_TEXT = (
    "The scientist carefully analyzed the data, wrote a detailed report, and shared "
    "the report with the team, but the team requested more data, so the scientist "
    "analyzed it again."
)

CAT_TEXT = "the cat sat on the mat the cat ran"


@pytest.fixture
def easy_store() -> GraphStore:
    return GraphStore.from_text(EASY_TEXT)


@pytest.fixture
def cat_store() -> GraphStore:
    return GraphStore.from_text(CAT_TEXT)


@pytest.fixture
def easy_file(tmp_path):
    path = tmp_path / "Easy Test.txt"
    path.write_text(EASY_TEXT, encoding="utf-8")
    return path
