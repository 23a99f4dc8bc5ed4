from releasekit.common.settings import Settings
from releasekit.services.movies.payload_lookup import PayloadMovieLookup
from releasekit.services.release.pipeline import ReleasePipeline
from releasekit.services.release.silent import SilentPrompter

MATRIX = {
    "id": 603,
    "title": "Matrix",
    "original_title": "The Matrix",
    "release_date": "1999-03-31",
    "genres": [{"id": 28, "name": "Action"}],
    "credits": {"crew": [{"name": "Lana Wachowski", "job": "Director"}], "cast": []},
}


class FakeClient:
    def __init__(self):
        self.queries = []
        self.ids = []

    def search(self, keywords):
        self.queries.append(keywords)
        return [{"id": 603, "title": "Matrix", "release_date": "1999"}] if "matrix" in keywords else []

    def details(self, movie_id):
        self.ids.append(movie_id)
        return MATRIX


def test_search_and_details_map_payloads():
    client = FakeClient()
    lookup = PayloadMovieLookup(client.search, client.details)

    results = lookup.search("the matrix")
    assert [(m.id, m.title, m.year()) for m in results] == [(603, "Matrix", "1999")]
    assert lookup.search("nothing") == []

    movie = lookup.details(603)
    assert movie.original_title == "The Matrix"
    assert movie.directors == ["Lana Wachowski"]
    assert movie.genres == ["Action"]


def test_search_tolerates_none_from_client():
    lookup = PayloadMovieLookup(lambda keywords: None, lambda movie_id: {})
    assert lookup.search("x") == []
    assert lookup.details(1).title == ""


def test_pipeline_identifies_through_payload_lookup(tmp_path):
    client = FakeClient()
    pipeline = ReleasePipeline(object(), PayloadMovieLookup(client.search, client.details), SilentPrompter(), settings=Settings(_env_file=None))
    movie = pipeline.identify("The.Matrix.1999.1080p.BluRay.x264-GRP.mkv")
    assert movie.directors == ["Lana Wachowski"]
    assert client.queries == ["the matrix"]
    assert client.ids == [603]
