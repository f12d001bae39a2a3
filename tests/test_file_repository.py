"""Tests for the feed loaders and the name normalizer."""

from __future__ import annotations

from pathlib import Path

import pytest

from roadtrip.adapters.graph import FileGraphRepository
from roadtrip.adapters.naming import TableNameNormalizer
from roadtrip.config import GraphConfig, NamingConfig
from roadtrip.domain.errors import GraphError, MalformedWeightError
from roadtrip.domain.models import Country

BORDERS = "\n".join(
    [
        "2\tUSA\tU.S.A.\tCanada\t1\t1",
        "2\tUSA\tUSA\tMexico\t1\t1",
        "20\tCAN\tCanada\tU.S.A.\t1\t1",  # same border listed from the other side
        "210\tNTH\tNetherlands\tBelgium\t1\t1",
        "short\tline",
        "",
    ]
)

DISTANCES = "\n".join(
    [
        "numa,ida,numb,idb,kmdist,midist",
        "2,USA,20,CAN,731,454",
        "2,USA,70,MEX,3024,1879",
        "210,NTH,20,CAN,5667,3521",  # not bordering, ignored
        "2,USA",
        "",
    ]
)

CODES = "\n".join(
    [
        "statenum\tstateabb\tcountryname\tstart\tend\textra",
        "2\tUSA\tU.S.A.\t1816-01-01\t2020-12-31\tx",
        "20\tCAN\tCanada\t1920-01-10\t2020-12-31\tx",
        "70\tMEX\tMexico\t1831-01-01\t2020-12-31\tx",
        "210\tNTH\tNetherlands\t1816-01-01\t2020-12-31",
    ]
)


def write_feeds(directory: Path, distances: str = DISTANCES) -> GraphConfig:
    (directory / "borders.txt").write_text(BORDERS, encoding="utf-8")
    (directory / "capdist.csv").write_text(distances, encoding="utf-8")
    (directory / "state_name.tsv").write_text(CODES, encoding="utf-8")
    return GraphConfig(data_dir=directory)


@pytest.fixture
def repository(tmp_path) -> FileGraphRepository:
    return FileGraphRepository(config=write_feeds(tmp_path), normalizer=TableNameNormalizer(NamingConfig()))


def test_load_builds_normalized_vertices(repository):
    graph = repository.load()

    assert set(graph) == {"USA", "Canada", "Mexico", "Netherlands", "Belgium"}
    assert graph.edge_count == 3


def test_duplicate_border_lines_are_merged(repository):
    graph = repository.load()

    assert [n.vertex for n in graph["Canada"]] == ["USA"]


def test_distances_resolve_edges(repository):
    graph = repository.load()

    assert graph.weight("USA", "Canada") == 731.0
    assert graph.weight("Canada", "USA") == 731.0
    assert graph.weight("Mexico", "USA") == 3024.0
    assert not graph.are_adjacent("Netherlands", "Canada")


def test_distance_codes_resolve_through_code_table(repository, caplog):
    with caplog.at_level("WARNING"):
        graph = repository.load()

    assert graph.weight("USA", "Mexico") == 3024.0
    assert ("USA", "Canada") not in graph.unresolved_edges()
    assert ("Canada", "USA") not in graph.unresolved_edges()


def test_unknown_distance_codes_fall_back_to_names(tmp_path):
    distances = "numa,ida,numb,idb,kmdist\n2,U.S.A.,20,Canada,731\n"
    repository = FileGraphRepository(
        config=write_feeds(tmp_path, distances),
        normalizer=TableNameNormalizer(NamingConfig()),
    )

    graph = repository.load()

    assert graph.weight("USA", "Canada") == 731.0
    assert not graph.vertex_exists("U.S.A.")


def test_edges_without_distance_stay_unresolved(repository, caplog):
    with caplog.at_level("WARNING"):
        graph = repository.load()

    assert graph.unresolved_edges() == [("Netherlands", "Belgium")]
    assert "Edges without distance" in caplog.text


def test_load_is_cached(repository):
    assert repository.load() is repository.load()

    repository.clear_cache()
    assert repository._graph is None


def test_malformed_distance_raises(tmp_path):
    distances = "header,a,b,c,d\n2,USA,20,Canada,far,0\n"
    repository = FileGraphRepository(config=write_feeds(tmp_path, distances))

    with pytest.raises(MalformedWeightError) as exc:
        repository.load()
    assert exc.value.line_number == 2
    assert exc.value.value == "far"


def test_negative_distance_raises(tmp_path):
    distances = "header,a,b,c,d\n2,USA,20,Canada,-5,0\n"
    repository = FileGraphRepository(config=write_feeds(tmp_path, distances))

    with pytest.raises(MalformedWeightError):
        repository.load()


def test_missing_file_raises_graph_error(tmp_path):
    repository = FileGraphRepository(config=GraphConfig(data_dir=tmp_path / "missing"))

    with pytest.raises(GraphError) as exc:
        repository.load()
    assert exc.value.file_path.endswith("borders.txt")
    assert isinstance(exc.value.cause, OSError)


def test_country_codes(repository):
    assert repository.country_by_code("USA") == Country(code="USA", name="USA")
    assert repository.country_by_code(" CAN ") == Country(code="CAN", name="Canada")
    assert repository.country_by_code("NTH") is None  # fewer than six fields
    assert len(repository.countries()) == 3


class TestTableNameNormalizer:
    def test_default_overrides(self):
        normalizer = TableNameNormalizer(NamingConfig())

        assert normalizer.normalize("U.S.A.") == "USA"
        assert normalizer.normalize("Bosnia-Herzegovina") == "Bosnia and Herzegovina"
        assert normalizer.normalize(" Zambia. ") == "Zambia"

    def test_unknown_names_are_stripped_only(self):
        normalizer = TableNameNormalizer(NamingConfig())

        assert normalizer.normalize("  France ") == "France"

    def test_custom_overrides(self):
        normalizer = TableNameNormalizer(NamingConfig(overrides={"Holland": "Netherlands"}))

        assert normalizer.normalize("Holland") == "Netherlands"
        assert normalizer.normalize("U.S.A.") == "U.S.A."

    def test_blank_override_target_is_rejected(self):
        with pytest.raises(ValueError):
            NamingConfig(overrides={"Holland": "  "})
