"""Tests for the GDF reader and writer."""

import pytest

from graphset.core.exceptions import GDFParseError, SerializationError
from graphset.core.graph import Graph
from graphset.io import gdf

SAMPLE_GDF = """nodedef>label VARCHAR,id INT,score DOUBLE,active BOOLEAN
foo,2,0.5,true
bar,1,1.25,FALSE
edgedef>node1 VARCHAR,node2 VARCHAR,weight FLOAT
foo,bar,3.5
"""


def test_parse_sample():
    """Test parsing typed node and edge sections."""
    g = gdf.parse(SAMPLE_GDF)

    expected = Graph(
        [
            {"label": "foo", "id": 2, "score": 0.5, "active": True},
            {"label": "bar", "id": 1, "score": 1.25, "active": False},
        ],
        [{"node1": "foo", "node2": "bar", "weight": 3.5}],
    )
    assert g == expected
    assert isinstance(g.nodes[0]["id"], int)
    assert isinstance(g.edges[0]["weight"], float)


def test_parse_without_edges():
    """Test that a missing edge section gives no edges."""
    g = gdf.parse("nodedef>label VARCHAR\nfoo\nbar\n")

    assert g.nodes == [{"label": "foo"}, {"label": "bar"}]
    assert len(g.edges) == 0


def test_parse_missing_header():
    """Test that text without nodedef> is rejected."""
    with pytest.raises(GDFParseError):
        gdf.parse("foo,bar\n")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("FALSE", False),
        ("false", False),
        ("null", False),
        ("NULL", False),
        ("yes", True),
        ("true", True),
        ("", True),
        ("0", True),
    ],
)
def test_parse_boolean_field(raw, expected):
    """Test the boolean parsing rule."""
    assert gdf.parse_field(raw, "boolean") is expected


@pytest.mark.parametrize(
    "raw, value_type, expected",
    [
        ("42", "int", 42),
        ("-7", "int", -7),
        ("12abc", "int", 12),
        ("", "int", 0),
        ("abc", "int", 0),
        ("2.5", "float", 2.5),
        ("1e3", "float", 1000.0),
        ("", "float", 0.0),
        ("text", None, "text"),
        ("text", "VARCHAR", "text"),
    ],
)
def test_parse_field(raw, value_type, expected):
    """Test numeric and string field conversion."""
    assert gdf.parse_field(raw, value_type) == expected


@pytest.mark.parametrize(
    "definition, expected",
    [
        ("id INT", ("id", "int")),
        ("id integer", ("id", "int")),
        ("n TINYINT", ("n", "int")),
        ("n smallint", ("n", "int")),
        ("n BigInt", ("n", "int")),
        ("x DOUBLE", ("x", "float")),
        ("x float", ("x", "float")),
        ("ok Boolean", ("ok", "boolean")),
        ("label VARCHAR", ("label", "VARCHAR")),
        ("full name VARCHAR", ("full name", "VARCHAR")),
        ("label", ("label", None)),
        ("span interval", ("span", "interval")),
    ],
)
def test_read_def(definition, expected):
    """Test column definition parsing."""
    assert gdf.read_def(definition) == expected


def test_parse_short_and_long_rows():
    """Test rows with fewer or more values than columns."""
    g = gdf.parse("nodedef>label VARCHAR,id INT\nfoo\nbar,1,extra\n")

    assert g.nodes == [{"label": "foo"}, {"label": "bar", "id": 1}]


def test_parse_skips_blank_lines():
    """Test that blank lines are not rows."""
    g = gdf.parse("nodedef>label VARCHAR\r\nfoo\r\n\r\nbar\r\n")

    assert g.nodes == [{"label": "foo"}, {"label": "bar"}]


def test_parse_matches_literal_graph():
    """Test that parsed records equal a hand-built graph."""
    text = (
        "nodedef>label VARCHAR,id INT\n"
        "foo,2\n"
        "bar,1\n"
        "edgedef>node1 VARCHAR,node2 VARCHAR\n"
        "foo,bar\n"
    )
    literal = Graph(
        [{"label": "foo", "id": 2}, {"label": "bar", "id": 1}],
        [{"node1": "foo", "node2": "bar"}],
    )
    assert gdf.parse(text) == literal


def test_unparse():
    """Test rendering a graph."""
    g = Graph(
        [{"label": "foo", "id": 2, "ok": True}, {"label": "bar", "id": 1, "ok": False}],
        [{"node1": "foo", "node2": "bar", "w": 0.5}],
    )

    assert gdf.unparse(g) == (
        "nodedef>label VARCHAR,id INT,ok BOOLEAN\n"
        "foo,2,true\n"
        "bar,1,false\n"
        "edgedef>node1 VARCHAR,node2 VARCHAR,w DOUBLE\n"
        "foo,bar,0.5\n"
    )


def test_unparse_missing_fields_and_no_edges():
    """Test that missing fields are empty and edgedef> is omitted."""
    g = Graph([{"label": "foo", "city": "Paris"}, {"label": "bar"}])

    assert gdf.unparse(g) == "nodedef>label VARCHAR,city VARCHAR\nfoo,Paris\nbar,\n"


def test_unparse_empty_graph():
    """Test rendering an empty graph."""
    assert gdf.unparse(Graph()) == "nodedef>\n"
    assert gdf.parse(gdf.unparse(Graph())) == Graph()


def test_unparse_gephi_bigint():
    """Test BIGINT typing only in gephi mode."""
    g = Graph([{"n": 2**40}])

    assert gdf.unparse(g).startswith("nodedef>n INT\n")
    assert gdf.unparse(g, gephi=True).startswith("nodedef>n BIGINT\n")


def test_unparse_then_parse(sample_graph):
    """Test that rendered text parses back to the same graph."""
    assert gdf.parse(gdf.unparse(sample_graph)) == sample_graph


def test_dump_and_load(tmp_path, sample_graph):
    """Test file helpers."""
    path = str(tmp_path / "graph.gdf")
    gdf.dump(sample_graph, path)

    assert gdf.load(path) == sample_graph


def test_load_missing_file(tmp_path):
    """Test loading a file that does not exist."""
    with pytest.raises(SerializationError):
        gdf.load(str(tmp_path / "missing.gdf"))
