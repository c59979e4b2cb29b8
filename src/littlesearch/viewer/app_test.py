import pytest

from littlesearch.index.engine import SearchEngine
from littlesearch.viewer import app as viewer


@pytest.fixture
def client():
    engine = SearchEngine({"the"})
    engine.make_index(
        [
            ("d1", "The cat sat on the cat".split()),
            ("d2", "dog dog cat".split()),
        ]
    )
    viewer.set_engine(engine)
    return viewer.app.test_client()


def test_api_search(client):
    resp = client.get("/api/search?kw1=Cat!&kw2=DOG")
    assert resp.status_code == 200
    assert resp.get_json() == {"kw1": "cat", "kw2": "dog", "results": ["d1", "d2"]}


def test_api_search_no_match(client):
    resp = client.get("/api/search?kw1=zebra")
    assert resp.status_code == 200
    assert resp.get_json()["results"] is None


def test_api_search_requires_a_keyword(client):
    resp = client.get("/api/search")
    assert resp.status_code == 400


def test_api_keyword(client):
    resp = client.get("/api/keywords/cat")
    assert resp.get_json() == {
        "keyword": "cat",
        "occurrences": [
            {"doc_id": "d1", "frequency": 2},
            {"doc_id": "d2", "frequency": 1},
        ],
    }
    assert client.get("/api/keywords/the").status_code == 404


def test_index_page(client):
    resp = client.get("/?kw1=cat&kw2=dog")
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "<li>d1</li>" in body
    assert "4 keywords indexed." in body


def test_main_missing_inputs_exits(tmp_path):
    with pytest.raises(SystemExit):
        viewer.main(
            [
                "--docs",
                str(tmp_path / "docs.txt"),
                "--noise-words",
                str(tmp_path / "noisewords.txt"),
            ]
        )
